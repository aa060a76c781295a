"""
Helper utility functions for the ytdigest application.
"""

import os
import json
import re
from typing import Any, List, Optional
from urllib.parse import urlparse, parse_qs

from ytdigest.models.schemas import TimestampLink
from ytdigest.utils.error_handling import InvalidURLError

TIMESTAMP_PATTERN = re.compile(r"(\d{1,2}:\d{2}(?::\d{2})?)")


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Supports ``youtube.com`` URLs carrying a ``v`` query parameter and
    ``youtu.be`` short links carrying the ID as the path.

    Args:
        url: YouTube URL

    Returns:
        The video ID, or None when the URL has no recognizable pattern

    Raises:
        InvalidURLError: If the string is not an absolute URL
    """
    try:
        parsed = urlparse(url.strip())
    except ValueError as e:
        raise InvalidURLError("Invalid URL format", details=str(e)) from e
    if not parsed.scheme or not parsed.netloc:
        raise InvalidURLError("Invalid URL format", details=f"Could not parse URL: {url}")

    hostname = parsed.hostname or ""
    video_id = ""
    if "youtube.com" in hostname:
        video_id = parse_qs(parsed.query).get("v", [""])[0]
    elif "youtu.be" in hostname:
        video_id = parsed.path[1:]

    return video_id or None


def parse_timestamp(value: str) -> int:
    """Convert ``m:ss`` or ``h:mm:ss`` into seconds. Anything else is 0."""
    parts = [int(part) for part in value.split(":")]
    if len(parts) == 2:
        return parts[0] * 60 + parts[1]
    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    return 0


def timestamp_url(video_id: str, seconds: int) -> str:
    """Watch URL that starts playback at the given offset."""
    return f"https://www.youtube.com/watch?v={video_id}&t={seconds}s"


def find_timestamps(text: str, video_id: str) -> List[TimestampLink]:
    """
    Find timestamp-like substrings in a summary.

    Args:
        text: Summary text
        video_id: Video the timestamps refer to

    Returns:
        One TimestampLink per occurrence, in text order
    """
    links = []
    for match in TIMESTAMP_PATTERN.finditer(text or ""):
        label = match.group(1)
        seconds = parse_timestamp(label)
        links.append(TimestampLink(label=label, seconds=seconds, url=timestamp_url(video_id, seconds)))
    return links


def link_timestamps(text: str, video_id: str) -> str:
    """Rewrite every timestamp in ``text`` as a markdown link into the video."""
    if not text:
        return text

    def _replace(match):
        label = match.group(1)
        return f"[{label}]({timestamp_url(video_id, parse_timestamp(label))})"

    return TIMESTAMP_PATTERN.sub(_replace, text)


def save_json(data: Any, filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    ensure_dir(os.path.dirname(os.path.abspath(filepath)))
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(data, f, ensure_ascii=False, default=str)


def load_json(filepath: str) -> Any:
    """Load data from a JSON file."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def ensure_dir(directory: str) -> None:
    """Ensure a directory exists, creating it if necessary."""
    os.makedirs(directory, exist_ok=True)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    The suffix is appended after the first ``max_length`` characters, so the
    result is at most ``max_length + len(suffix)`` long.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix
