"""
Module for fetching YouTube caption transcripts.
"""

from typing import List, Optional

from requests.exceptions import RequestException
from youtube_transcript_api import (
    YouTubeTranscriptApi,
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
)

from ytdigest.models.schemas import Transcript, TranscriptSegment
from ytdigest.utils.error_handling import TranscriptUnavailableError
from ytdigest.utils.helpers import truncate_text
from ytdigest.utils.logger import logging
from ytdigest.config import config

TRANSCRIPT_UNAVAILABLE_MESSAGE = (
    "Could not fetch transcript. The video might not have captions enabled."
)
TRUNCATION_SUFFIX = "...[truncated]"


class TranscriptFetcher:
    """Class to handle transcript retrieval operations."""

    def __init__(self, languages: Optional[List[str]] = None, api: Optional[YouTubeTranscriptApi] = None):
        """
        Initialize the fetcher.

        Args:
            languages: Preferred caption languages, in priority order
            api: Transcript API client (a default client is created if None)
        """
        self.languages = languages or config.TRANSCRIPT_LANGUAGES
        self.api = api or YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> Transcript:
        """
        Fetch the caption transcript for a video.

        Preferred languages are tried first; when none of them exist the
        first caption track the video offers is used.

        Args:
            video_id: YouTube video ID

        Returns:
            Transcript with segments in timeline order

        Raises:
            TranscriptUnavailableError: If captions are disabled, restricted,
                missing, or empty
        """
        logging.info(f"Fetching transcript for video: {video_id}")
        try:
            try:
                fetched = self.api.fetch(video_id, languages=self.languages)
            except NoTranscriptFound:
                logging.info(f"No {self.languages} transcript for {video_id}, using first available track")
                fetched = next(iter(self.api.list(video_id))).fetch()
        except (CouldNotRetrieveTranscript, RequestException, StopIteration) as e:
            logging.error(f"Transcript error for video {video_id}: {e}")
            raise TranscriptUnavailableError(TRANSCRIPT_UNAVAILABLE_MESSAGE, details=str(e)) from e

        segments = [
            TranscriptSegment(text=item["text"], start=item.get("start", 0.0), duration=item.get("duration", 0.0))
            for item in fetched.to_raw_data()
        ]
        transcript = Transcript(
            video_id=video_id,
            segments=segments,
            language=getattr(fetched, "language_code", None),
        )

        if not transcript.text.strip():
            raise TranscriptUnavailableError(
                TRANSCRIPT_UNAVAILABLE_MESSAGE, details="The transcript is empty."
            )

        logging.info(f"Fetched {len(segments)} transcript segments for video {video_id}")
        return transcript


def prepare_transcript_text(text: str, max_length: int = config.MAX_TRANSCRIPT_CHARS) -> str:
    """Bound the transcript sent to a language model."""
    return truncate_text(text, max_length=max_length, suffix=TRUNCATION_SUFFIX)
