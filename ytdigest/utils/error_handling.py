"""
Centralized error handling for the application.

Every error the service reports to a caller is a ``SummarizerError`` carrying
the HTTP status it maps to. The API layer renders them as
``{"error": ..., "details": ...}``.
"""

from typing import Optional, Dict, Any


class SummarizerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error into the API error payload."""
        payload: Dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidURLError(SummarizerError, ValueError):
    """The submitted URL is missing or cannot be parsed."""

    status_code = 400


class VideoIdNotFoundError(SummarizerError, ValueError):
    """The URL parsed but no YouTube video id could be found in it."""

    status_code = 400


class TranscriptUnavailableError(SummarizerError):
    """Captions are disabled, restricted, missing or empty."""

    status_code = 404


class SummarizationProviderError(SummarizerError):
    """The LLM provider failed (auth, quota, network, empty response)."""

    status_code = 502


class SummarizationError(SummarizerError):
    """No summarization method produced a result."""

    status_code = 500


class ProcessingError(SummarizerError):
    """Unexpected failure while processing a video."""

    status_code = 500


class HistoryEntryNotFoundError(SummarizerError):
    """No history entry has the requested id."""

    status_code = 404
