"""
Module for summarizing transcripts using LLM models.
"""

import os
from typing import Optional

from langchain_core.documents import Document
from langchain_core.prompts import ChatPromptTemplate
from langchain_text_splitters import RecursiveCharacterTextSplitter
from langchain.chat_models import init_chat_model

from ytdigest.core.prompts import summary_template, map_template, reduce_template
from ytdigest.models.schemas import SummaryConfig
from ytdigest.utils.error_handling import SummarizationProviderError
from ytdigest.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize the summarizer with API key.

        Args:
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise ValueError("Groq API key is required. Set it in .env file or pass directly.")

    def _get_llm(self, config: SummaryConfig):
        return init_chat_model(
            model=config.model,
            model_provider="groq",
            api_key=self.api_key,
            temperature=config.temperature,
            max_tokens=config.max_tokens
        )

    @staticmethod
    def _content(response) -> str:
        content = (getattr(response, "content", None) or "").strip()
        if not content:
            raise SummarizationProviderError("Summarization provider returned an empty response")
        return content

    def summarize(self, transcript_text: str, config: SummaryConfig) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript_text: Full transcript text to summarize
            config: Configuration for summarization

        Returns:
            Summarized text
        """
        document = Document(page_content=transcript_text)

        # For longer transcripts, split into chunks
        text_splitter = RecursiveCharacterTextSplitter(
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap
        )
        docs = text_splitter.split_documents([document])

        llm = self._get_llm(config)

        # For shorter transcripts: use the "stuff" method
        if len(docs) <= 1:
            prompt = ChatPromptTemplate.from_messages([("human", summary_template)])
            summary = llm.invoke(prompt.format_messages(
                text=transcript_text,
                num_sentences=config.num_sentences,
            ))
            return self._content(summary)

        # For longer transcripts: use map-reduce
        logging.info(f"Summarizing transcript in {len(docs)} chunks")
        map_prompt = ChatPromptTemplate.from_messages([("human", map_template)])

        interim_summaries = []
        for doc in docs:
            interim_summary = llm.invoke(map_prompt.format_messages(text=doc.page_content))
            interim_summaries.append(self._content(interim_summary))

        reduce_prompt = ChatPromptTemplate.from_messages([("human", reduce_template)])
        final_summary = llm.invoke(reduce_prompt.format_messages(
            summaries="\n\n".join(interim_summaries),
            num_sentences=config.num_sentences,
        ))
        return self._content(final_summary)
