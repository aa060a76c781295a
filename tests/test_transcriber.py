"""
Tests for the transcript fetcher.
"""

import pytest
from unittest.mock import MagicMock

from requests.exceptions import ConnectionError as RequestsConnectionError
from youtube_transcript_api import NoTranscriptFound, TranscriptsDisabled, VideoUnavailable

from ytdigest.core.transcriber import (
    TRANSCRIPT_UNAVAILABLE_MESSAGE,
    TranscriptFetcher,
    prepare_transcript_text,
)
from ytdigest.models.schemas import Transcript
from ytdigest.utils.error_handling import TranscriptUnavailableError


def fetched_transcript(items, language_code="en"):
    """Mimic the library's FetchedTranscript."""
    fetched = MagicMock()
    fetched.to_raw_data.return_value = items
    fetched.language_code = language_code
    return fetched


@pytest.fixture
def raw_segments():
    return [
        {"text": "Welcome back to the channel.", "start": 0.0, "duration": 2.5},
        {"text": "Today we talk about testing.", "start": 2.5, "duration": 3.0},
    ]


@pytest.fixture
def mock_api(raw_segments):
    """Fixture to mock the YouTubeTranscriptApi client."""
    api = MagicMock()
    api.fetch.return_value = fetched_transcript(raw_segments)
    return api


def test_fetch_transcript(mock_api):
    """Test fetching and joining a transcript."""
    fetcher = TranscriptFetcher(languages=["en"], api=mock_api)
    transcript = fetcher.fetch("abc12345678")

    mock_api.fetch.assert_called_once_with("abc12345678", languages=["en"])
    assert isinstance(transcript, Transcript)
    assert transcript.video_id == "abc12345678"
    assert transcript.language == "en"
    assert [segment.start for segment in transcript.segments] == [0.0, 2.5]
    assert transcript.text == "Welcome back to the channel. Today we talk about testing."


def test_fetch_falls_back_to_first_available_track(raw_segments):
    """Test using another language when the preferred one is missing."""
    api = MagicMock()
    api.fetch.side_effect = NoTranscriptFound("abc12345678", ["en"], MagicMock())
    track = MagicMock()
    track.fetch.return_value = fetched_transcript(raw_segments, language_code="de")
    api.list.return_value = [track]

    transcript = TranscriptFetcher(languages=["en"], api=api).fetch("abc12345678")

    api.list.assert_called_once_with("abc12345678")
    assert transcript.language == "de"
    assert len(transcript.segments) == 2


@pytest.mark.parametrize("error", [
    TranscriptsDisabled("abc12345678"),
    VideoUnavailable("abc12345678"),
    RequestsConnectionError("network down"),
])
def test_fetch_errors_become_transcript_unavailable(error):
    api = MagicMock()
    api.fetch.side_effect = error

    with pytest.raises(TranscriptUnavailableError) as exc_info:
        TranscriptFetcher(api=api).fetch("abc12345678")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == TRANSCRIPT_UNAVAILABLE_MESSAGE


def test_no_tracks_at_all():
    api = MagicMock()
    api.fetch.side_effect = NoTranscriptFound("abc12345678", ["en"], MagicMock())
    api.list.return_value = []

    with pytest.raises(TranscriptUnavailableError):
        TranscriptFetcher(api=api).fetch("abc12345678")


@pytest.mark.parametrize("items", [
    [],
    [{"text": "   ", "start": 0.0, "duration": 1.0}],
])
def test_empty_transcript_is_unavailable(items):
    api = MagicMock()
    api.fetch.return_value = fetched_transcript(items)

    with pytest.raises(TranscriptUnavailableError) as exc_info:
        TranscriptFetcher(api=api).fetch("abc12345678")

    assert exc_info.value.details == "The transcript is empty."


def test_prepare_transcript_text():
    assert prepare_transcript_text("short text", max_length=100) == "short text"
    assert prepare_transcript_text("x" * 50, max_length=10) == "x" * 10 + "...[truncated]"
