"""
Summarization strategies and the service that picks between them.

Two variants exist: the LLM summarizer and the extractive fallback. The
service resolves which ones are usable from configuration at call time and
falls through to the next one when a strategy fails.
"""

from typing import List, Optional

from ytdigest.config import config as app_config
from ytdigest.core.extractive import extractive_summarize
from ytdigest.core.summarizer import TranscriptSummarizer
from ytdigest.core.transcriber import prepare_transcript_text
from ytdigest.models.schemas import SummaryConfig, SummaryMethod, SummaryResult
from ytdigest.utils.error_handling import SummarizationError
from ytdigest.utils.logger import logging


class AISummaryStrategy:
    """Summarize with a Groq-hosted chat model."""

    method = SummaryMethod.AI

    def __init__(self, api_key: Optional[str] = None, summary_config: Optional[SummaryConfig] = None,
                 max_transcript_chars: int = app_config.MAX_TRANSCRIPT_CHARS):
        self.api_key = api_key
        self.summary_config = summary_config or SummaryConfig()
        self.max_transcript_chars = max_transcript_chars

    def is_available(self) -> bool:
        return bool(self.api_key)

    def summarize(self, text: str, num_sentences: int) -> str:
        summarizer = TranscriptSummarizer(api_key=self.api_key)
        summary_config = self.summary_config.model_copy(update={"num_sentences": num_sentences})
        return summarizer.summarize(prepare_transcript_text(text, self.max_transcript_chars), summary_config)


class ExtractiveSummaryStrategy:
    """Summarize locally by selecting representative transcript sentences."""

    method = SummaryMethod.EXTRACTIVE

    def is_available(self) -> bool:
        return True

    def summarize(self, text: str, num_sentences: int) -> str:
        return extractive_summarize(text, num_sentences)


class SummaryService:
    """Runs strategies in priority order until one succeeds."""

    def __init__(self, strategies: List):
        self.strategies = strategies

    def summarize(self, text: str, num_sentences: int = app_config.DEFAULT_NUM_SENTENCES) -> SummaryResult:
        """
        Summarize a transcript with the first strategy that succeeds.

        Unavailable strategies are skipped. A strategy that raises is logged
        and the next one is tried; nothing is retried.

        Args:
            text: Transcript text
            num_sentences: Target number of sentences or key points

        Returns:
            SummaryResult tagged with the method that produced it

        Raises:
            SummarizationError: If no strategy produced a summary
        """
        errors = []
        for strategy in self.strategies:
            if not strategy.is_available():
                logging.info(f"Summary method '{strategy.method.value}' not configured, skipping")
                continue
            try:
                summary = strategy.summarize(text, num_sentences)
            except Exception as e:
                logging.warning(f"Summary method '{strategy.method.value}' failed: {e}")
                errors.append(f"{strategy.method.value}: {e}")
                continue
            logging.info(f"Summary generated with method '{strategy.method.value}'")
            return SummaryResult(summary=summary, method=strategy.method)

        raise SummarizationError(
            "Failed to generate summary",
            details="; ".join(errors) or "No summarization method available",
        )


def build_summary_service(cfg=app_config, extractive_only: bool = False) -> SummaryService:
    """Resolve the strategy chain from configuration."""
    strategies = [ExtractiveSummaryStrategy()]
    if not extractive_only:
        ai_strategy = AISummaryStrategy(
            api_key=cfg.GROQ_API_KEY,
            summary_config=SummaryConfig(
                model=cfg.DEFAULT_SUMMARY_MODEL,
                temperature=cfg.SUMMARY_TEMPERATURE,
                max_tokens=cfg.SUMMARY_MAX_TOKENS,
            ),
            max_transcript_chars=cfg.MAX_TRANSCRIPT_CHARS,
        )
        strategies.insert(0, ai_strategy)
    return SummaryService(strategies)
