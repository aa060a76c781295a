"""
Configuration settings for the ytdigest application.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv

from ytdigest.utils.logger import logging


# Ensure environment variables are loaded
load_dotenv()


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Video Summarizer"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
    SUMMARIES_DIR = DATA_DIR / "summaries"
    HISTORY_FILE = DATA_DIR / "history.json"
    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR}/ytdigest.db")

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Summarization
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.3-70b-versatile")
    SUMMARY_TEMPERATURE = float(os.getenv("SUMMARY_TEMPERATURE", "0.0"))
    SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", "1024"))
    DEFAULT_NUM_SENTENCES = 5
    MAX_TRANSCRIPT_CHARS = int(os.getenv("MAX_TRANSCRIPT_CHARS", "30000"))

    # Transcripts
    TRANSCRIPT_LANGUAGES = _split_list(os.getenv("TRANSCRIPT_LANGUAGES", "en"))

    # History
    HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "20"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.SUMMARIES_DIR.mkdir(parents=True, exist_ok=True)

        if not cls.GROQ_API_KEY:
            logging.warning(
                "GROQ_API_KEY environment variable not set. "
                "Summaries will use the extractive fallback."
            )


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
