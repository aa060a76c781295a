"""
YouTube Video Summarizer.

Fetches the caption transcript of a YouTube video and summarizes it with an
LLM, falling back to a local extractive summarizer when no model is
configured or reachable.
"""

from ytdigest.config import config

__version__ = config.APP_VERSION
