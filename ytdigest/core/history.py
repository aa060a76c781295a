"""
Bounded summary history.

Entries are keyed by video id and kept newest first. Adding a video that is
already present changes nothing; adding beyond the limit evicts the oldest
entry. Persistence is delegated to a ``HistoryStore`` that applies one change
at a time; the history reloads from it after every mutation so entries written
by other processes or requests are kept.
"""

import os
from collections import OrderedDict
from typing import List, Optional

from ytdigest.config import config
from ytdigest.db.crud import add_history_entry, delete_history_entry, list_history
from ytdigest.models.schemas import HistoryEntry
from ytdigest.utils.helpers import load_json, save_json
from ytdigest.utils.logger import logging


class HistoryStore:
    """Persistence interface for the summary history."""

    def load(self) -> List[HistoryEntry]:
        raise NotImplementedError

    def add(self, entry: HistoryEntry, limit: int) -> HistoryEntry:
        raise NotImplementedError

    def remove(self, entry_id: str) -> bool:
        raise NotImplementedError


class ListHistoryStore(HistoryStore):
    """Store that rewrites the whole entry list on every change."""

    def save(self, entries: List[HistoryEntry]) -> None:
        raise NotImplementedError

    def add(self, entry: HistoryEntry, limit: int) -> HistoryEntry:
        """Store ``entry`` as the newest unless its video is already present."""
        entries = self.load()
        for existing in entries:
            if existing.video_id == entry.video_id:
                return existing
        self.save([entry] + entries[:limit - 1])
        return entry

    def remove(self, entry_id: str) -> bool:
        entries = self.load()
        kept = [entry for entry in entries if entry.id != entry_id]
        if len(kept) == len(entries):
            return False
        self.save(kept)
        return True


class MemoryHistoryStore(ListHistoryStore):
    """Keeps the history in process memory."""

    def __init__(self, entries: Optional[List[HistoryEntry]] = None):
        self.entries = list(entries or [])

    def load(self) -> List[HistoryEntry]:
        return list(self.entries)

    def save(self, entries: List[HistoryEntry]) -> None:
        self.entries = list(entries)


class JsonHistoryStore(ListHistoryStore):
    """Keeps the history in a JSON file."""

    def __init__(self, path=config.HISTORY_FILE):
        self.path = str(path)

    def load(self) -> List[HistoryEntry]:
        if not os.path.exists(self.path):
            return []
        try:
            data = load_json(self.path)
            return [HistoryEntry.model_validate(item) for item in data]
        except ValueError as e:
            logging.error(f"Failed to parse history file {self.path}: {e}")
            return []

    def save(self, entries: List[HistoryEntry]) -> None:
        save_json([entry.model_dump(mode="json") for entry in entries], self.path)


class SQLHistoryStore(HistoryStore):
    """Keeps the history in the application database."""

    def __init__(self, db):
        self.db = db

    def load(self) -> List[HistoryEntry]:
        return list_history(self.db)

    def add(self, entry: HistoryEntry, limit: int) -> HistoryEntry:
        return add_history_entry(self.db, entry, limit)

    def remove(self, entry_id: str) -> bool:
        return delete_history_entry(self.db, entry_id)


class SummaryHistory:
    """Ordered, deduplicated, size-bounded history of generated summaries."""

    def __init__(self, store: HistoryStore, limit: int = config.HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("History limit must be a positive integer")
        self.store = store
        self.limit = limit
        self._entries: "OrderedDict[str, HistoryEntry]" = OrderedDict()
        self.load()

    def load(self) -> None:
        """Replace in-memory entries with the store's contents."""
        self._entries.clear()
        for entry in self.store.load():
            if entry.video_id in self._entries:
                continue
            self._entries[entry.video_id] = entry
            if len(self._entries) == self.limit:
                break

    def add(self, url: str, video_id: str, summary: str) -> HistoryEntry:
        """
        Record a generated summary.

        Args:
            url: Source URL as submitted
            video_id: YouTube video ID
            summary: Summary text

        Returns:
            The new entry, or the existing one if the video is already recorded
        """
        existing = self._entries.get(video_id)
        if existing is not None:
            return existing

        stored = self.store.add(HistoryEntry(url=url, video_id=video_id, summary=summary), self.limit)
        self.load()
        logging.debug(f"History holds {len(self._entries)} entries after adding {video_id}")
        return stored

    def remove(self, entry_id: str) -> bool:
        """Delete an entry by its id. Returns False if no entry matched."""
        removed = self.store.remove(entry_id)
        self.load()
        return removed

    def get(self, video_id: str) -> Optional[HistoryEntry]:
        return self._entries.get(video_id)

    def entries(self) -> List[HistoryEntry]:
        """All entries, newest first."""
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, video_id: str) -> bool:
        return video_id in self._entries
