from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from ytdigest.models.schemas import SummaryMethod, TimestampLink


class SummarizeRequest(BaseModel):
    """Model for requesting video summarization."""
    url: Optional[str] = None
    num_sentences: int = Field(default=5, ge=1, le=20)


class SummarizeResponse(BaseModel):
    """Model for summary responses."""
    summary: str
    method: SummaryMethod
    video_id: str
    timestamps: List[TimestampLink] = []


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str
    details: Optional[str] = None


class HistoryEntryResponse(BaseModel):
    """Model for a summary history entry."""
    id: str
    url: str
    video_id: str
    summary: str
    created_at: datetime
