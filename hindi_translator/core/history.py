"""
Bounded, de-duplicated lookup history.

Most recent first. One entry per case-insensitive English key.
"""

import json
import logging
import threading
from typing import List, Optional

from ..storage.models import HistoryItem
from ..storage.store import HISTORY_KEY, KeyValueStore

logger = logging.getLogger("hindi-translator")

MAX_HISTORY_ITEMS = 50


class HistoryLog:
    """Persisted most-recently-used list of past resolutions."""

    def __init__(self, store: KeyValueStore, max_items: int = MAX_HISTORY_ITEMS):
        if max_items <= 0:
            raise ValueError("max_items must be > 0")
        self.store = store
        self.max_items = max_items
        self._lock = threading.Lock()

    def _load(self) -> List[HistoryItem]:
        raw = self.store.get(HISTORY_KEY)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("Discarding unreadable history: %s", e)
            return []
        if not isinstance(data, list):
            logger.warning("Discarding history: expected a list")
            return []

        items = []
        for entry in data:
            try:
                items.append(HistoryItem.from_dict(entry))
            except (KeyError, TypeError) as e:
                logger.warning("Skipping malformed history entry %r: %s", entry, e)
        return items[:self.max_items]

    def _save(self, items: List[HistoryItem]) -> None:
        payload = [item.to_dict() for item in items]
        self.store.set(HISTORY_KEY, json.dumps(payload, ensure_ascii=False))

    def record(self, item: HistoryItem) -> None:
        """Move or insert item at the front, keeping at most max_items."""
        with self._lock:
            items = [existing for existing in self._load() if existing.key != item.key]
            items.insert(0, item)
            self._save(items[:self.max_items])
        logger.info("Recorded '%s' in history", item.english)

    def list(self) -> List[HistoryItem]:
        """Return the history, most recent first, as a fresh list."""
        return self._load()

    def find(self, english: str) -> Optional[HistoryItem]:
        """Return the entry for english (case-insensitive), if any."""
        key = english.strip().lower()
        for item in self._load():
            if item.key == key:
                return item
        return None

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._save([])
        logger.info("History cleared")

    def __len__(self) -> int:
        return len(self._load())
