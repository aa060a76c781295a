"""
Configuration for pytest tests.
"""

import os
import shutil
import tempfile

import pytest

# Must be set before ytdigest.config is imported
TEST_DATA_DIR = tempfile.mkdtemp(prefix="ytdigest-test-")
os.environ["DATA_DIR"] = TEST_DATA_DIR
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DATA_DIR}/test.db"
os.environ["ENVIRONMENT"] = "development"

from ytdigest.models.schemas import Transcript, TranscriptSegment  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def cleanup_test_data():
    """Remove the test data directory after the session."""
    yield
    shutil.rmtree(TEST_DATA_DIR, ignore_errors=True)


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=V3TUEeB0kW0"


@pytest.fixture
def lecture_sentences():
    """Sentences with a clear topic and two off-topic asides."""
    return [
        "Neural networks learn patterns from training data quickly.",
        "The weather yesterday afternoon was surprisingly pleasant outside.",
        "Training neural networks requires large training data collections.",
        "Neural networks and training data are central to this course.",
        "My grandmother enjoys gardening during sunny spring mornings."
    ]


@pytest.fixture
def lecture_text(lecture_sentences):
    """The lecture sentences as one transcript string."""
    return " ".join(lecture_sentences)


@pytest.fixture
def make_transcript():
    """Build a Transcript whose segments are the given sentences."""
    def _make(video_id="V3TUEeB0kW0", sentences=()):
        segments = [
            TranscriptSegment(text=text, start=float(i * 5), duration=5.0)
            for i, text in enumerate(sentences)
        ]
        return Transcript(video_id=video_id, segments=segments, language="en")
    return _make
