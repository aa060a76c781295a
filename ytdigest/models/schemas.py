"""
Data models for the ytdigest application.
"""
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_validator

from ytdigest.config import config


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SummaryMethod(str, Enum):
    """Which summarization path produced a result."""
    AI = "ai"
    EXTRACTIVE = "extractive"


class TranscriptSegment(BaseModel):
    """One caption unit from a video's caption track."""
    text: str
    start: float = 0.0
    duration: float = 0.0


class Transcript(BaseModel):
    """Ordered caption segments for a single video."""
    video_id: str
    segments: List[TranscriptSegment] = []
    language: Optional[str] = None

    @property
    def text(self) -> str:
        """The caption text joined in timeline order."""
        return " ".join(segment.text for segment in self.segments)


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    temperature: float = config.SUMMARY_TEMPERATURE
    max_tokens: int = config.SUMMARY_MAX_TOKENS
    num_sentences: int = config.DEFAULT_NUM_SENTENCES
    chunk_size: int = 12000
    chunk_overlap: int = 400

    @field_validator('num_sentences')
    def validate_num_sentences(cls, v):
        if v < 1:
            raise ValueError('num_sentences must be a positive integer')
        return v


class SummaryResult(BaseModel):
    """A summary together with the method that produced it."""
    summary: str
    method: SummaryMethod


class VideoSummary(BaseModel):
    """Model for storing video summary information."""
    video_id: str
    url: str
    summary: str
    method: SummaryMethod
    transcript_text: Optional[str] = None
    transcript_segments: Optional[List[Dict[str, Any]]] = None
    created_at: datetime = Field(default_factory=_utcnow)


class HistoryEntry(BaseModel):
    """A previously generated summary, keyed by video id."""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    url: str
    video_id: str
    summary: str
    created_at: datetime = Field(default_factory=_utcnow)

    model_config = {"from_attributes": True}


class TimestampLink(BaseModel):
    """A timestamp found in a summary and the video position it points to."""
    label: str
    seconds: int
    url: str
