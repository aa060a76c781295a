"""
API routes for the ytdigest application.
"""

import traceback
from typing import List
from fastapi import APIRouter, Depends, Path, Response

from ytdigest.api.schemas import (
    SummarizeRequest,
    SummarizeResponse,
    ErrorResponse,
    HistoryEntryResponse,
)
from ytdigest.config import config
from ytdigest.core.history import SummaryHistory, SQLHistoryStore
from ytdigest.core.pipeline import summarize_youtube_video
from ytdigest.core.strategies import SummaryService, build_summary_service
from ytdigest.core.transcriber import TranscriptFetcher
from ytdigest.db.database import get_db, DBSession
from ytdigest.utils.error_handling import (
    HistoryEntryNotFoundError,
    ProcessingError,
    SummarizerError,
)
from ytdigest.utils.helpers import find_timestamps
from ytdigest.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_transcript_fetcher() -> TranscriptFetcher:
    return TranscriptFetcher()


def get_summary_service() -> SummaryService:
    return build_summary_service()


def get_history(db: DBSession = Depends(get_db)) -> SummaryHistory:
    return SummaryHistory(SQLHistoryStore(db), limit=config.HISTORY_LIMIT)


@router.post("/summarize", response_model=SummarizeResponse, responses=ERROR_RESPONSES)
def summarize_video(
    request: SummarizeRequest,
    fetcher: TranscriptFetcher = Depends(get_transcript_fetcher),
    service: SummaryService = Depends(get_summary_service),
    history: SummaryHistory = Depends(get_history),
):
    """
    Summarize a YouTube video by URL.

    - Transcript problems are reported with a 404
    - LLM failures fall back to the extractive summary; ``method`` tells which one ran
    - Successful summaries are added to the history
    """
    try:
        summary = summarize_youtube_video(
            request.url,
            fetcher=fetcher,
            service=service,
            num_sentences=request.num_sentences,
        )
    except SummarizerError:
        raise
    except Exception as e:
        logging.error(f"Error processing video: {str(e)}")
        logging.error(traceback.format_exc())
        raise ProcessingError("Failed to process video", details=str(e))

    history.add(summary.url, summary.video_id, summary.summary)

    return SummarizeResponse(
        summary=summary.summary,
        method=summary.method,
        video_id=summary.video_id,
        timestamps=find_timestamps(summary.summary, summary.video_id),
    )


@router.get("/history", response_model=List[HistoryEntryResponse])
def list_history(history: SummaryHistory = Depends(get_history)):
    """List previously generated summaries, newest first."""
    return [HistoryEntryResponse(**entry.model_dump()) for entry in history.entries()]


@router.delete("/history/{entry_id}", status_code=204, responses={404: {"model": ErrorResponse}})
def delete_history_entry(
    entry_id: str = Path(..., description="History entry ID"),
    history: SummaryHistory = Depends(get_history),
):
    """Delete a single history entry."""
    if not history.remove(entry_id):
        raise HistoryEntryNotFoundError("History entry not found", details=f"No entry with id {entry_id}")
    return Response(status_code=204)
