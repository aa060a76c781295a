"""
Core functionality for the ytdigest application.

This package contains modules for fetching caption transcripts, summarizing
them with an LLM or the extractive fallback, and keeping a summary history.
"""
