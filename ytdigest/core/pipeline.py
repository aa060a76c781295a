"""
End-to-end processing: YouTube URL -> transcript -> summary.
"""

from pathlib import Path
from typing import Optional

from ytdigest.config import config
from ytdigest.core.strategies import SummaryService, build_summary_service
from ytdigest.core.transcriber import TranscriptFetcher
from ytdigest.models.schemas import VideoSummary
from ytdigest.utils.error_handling import InvalidURLError, VideoIdNotFoundError
from ytdigest.utils.helpers import extract_video_id, save_json
from ytdigest.utils.logger import logging


def resolve_video_id(url: Optional[str]) -> str:
    """
    Validate a submitted URL and return its video ID.

    Raises:
        InvalidURLError: If the URL is missing or malformed
        VideoIdNotFoundError: If no video ID can be extracted
    """
    if not url or not url.strip():
        raise InvalidURLError("URL is required")

    video_id = extract_video_id(url)
    if not video_id:
        raise VideoIdNotFoundError("Could not extract video ID", details=f"Unrecognized YouTube URL: {url}")
    return video_id


def summarize_youtube_video(
    url: str,
    fetcher: Optional[TranscriptFetcher] = None,
    service: Optional[SummaryService] = None,
    num_sentences: int = config.DEFAULT_NUM_SENTENCES,
) -> VideoSummary:
    """
    Process a YouTube video: fetch its transcript and summarize it.

    The URL is validated before any network call is made.

    Args:
        url: YouTube video URL
        fetcher: Transcript fetcher (a default one is created if None)
        service: Summary service (resolved from configuration if None)
        num_sentences: Target number of sentences or key points

    Returns:
        VideoSummary object
    """
    video_id = resolve_video_id(url)

    fetcher = fetcher or TranscriptFetcher()
    service = service or build_summary_service()

    transcript = fetcher.fetch(video_id)
    transcript_text = transcript.text
    logging.info(f"Transcript for {video_id} has {len(transcript_text)} characters")

    result = service.summarize(transcript_text, num_sentences)

    return VideoSummary(
        video_id=video_id,
        url=url,
        summary=result.summary,
        method=result.method,
        transcript_text=transcript_text,
        transcript_segments=[segment.model_dump() for segment in transcript.segments],
    )


def save_summary(summary: VideoSummary, output_file: Optional[str] = None) -> Path:
    """Save the summary to a JSON file."""
    if output_file is None:
        output_file = Path(config.SUMMARIES_DIR) / f"{summary.video_id}_summary.json"
    else:
        output_file = Path(output_file)

    save_json(summary.model_dump(mode="json"), str(output_file))

    logging.info(f"Summary saved to: {output_file}")
    return output_file
