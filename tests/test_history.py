"""
Tests for the lookup history.
"""
import json

import pytest

from hindi_translator.core.history import MAX_HISTORY_ITEMS, HistoryLog
from hindi_translator.storage.models import HistoryItem
from hindi_translator.storage.store import HISTORY_KEY, MemoryKeyValueStore


def make_item(english: str, hindi: str = "कुछ", timestamp: str = "2024-03-01T12:00:00+00:00") -> HistoryItem:
    """Create a test history item."""
    return HistoryItem(
        english=english,
        hindi=hindi,
        romanized="kuchha",
        source="Offline",
        timestamp=timestamp,
    )


class TestHistoryLog:
    """Test recording, ordering and clearing."""

    def setup_method(self):
        """Set up a fresh log."""
        self.store = MemoryKeyValueStore()
        self.log = HistoryLog(self.store)

    def test_empty_by_default(self):
        """Test a new log has no entries."""
        assert self.log.list() == []

    def test_most_recent_first(self):
        """Test newest entries come first."""
        self.log.record(make_item("one"))
        self.log.record(make_item("two"))
        assert [item.english for item in self.log.list()] == ["two", "one"]

    def test_duplicate_moves_to_front_with_latest_data(self):
        """Test case-insensitive de-duplication."""
        self.log.record(make_item("water", hindi="old"))
        self.log.record(make_item("food"))
        self.log.record(make_item("WATER", hindi="पानी"))

        items = self.log.list()
        assert [item.english for item in items] == ["WATER", "food"]
        assert items[0].hindi == "पानी"

    def test_cap_at_fifty(self):
        """Test 51 distinct words keep only the 50 most recent."""
        for i in range(51):
            self.log.record(make_item(f"word{i}"))

        items = self.log.list()
        assert len(items) == MAX_HISTORY_ITEMS == 50
        assert items[0].english == "word50"
        assert items[-1].english == "word1"

    def test_clear(self):
        """Test clear followed by list is empty."""
        self.log.record(make_item("hello"))
        self.log.clear()
        assert self.log.list() == []
        assert json.loads(self.store.get(HISTORY_KEY)) == []

    def test_list_is_restartable(self):
        """Test list returns an independent sequence each time."""
        self.log.record(make_item("hello"))
        first = self.log.list()
        first.clear()
        assert len(self.log.list()) == 1

    def test_find(self):
        """Test quick re-lookup by English word."""
        self.log.record(make_item("Hello"))
        assert self.log.find("hello").english == "Hello"
        assert self.log.find("missing") is None

    def test_persisted_as_json_list(self):
        """Test the stored format."""
        self.log.record(make_item("hello", hindi="नमस्ते"))
        data = json.loads(self.store.get(HISTORY_KEY))
        assert data == [{
            "english": "hello",
            "hindi": "नमस्ते",
            "romanized": "kuchha",
            "source": "Offline",
            "timestamp": "2024-03-01T12:00:00+00:00",
        }]

    def test_malformed_entries_skipped(self):
        """Test broken stored entries are dropped."""
        self.store.set(HISTORY_KEY, json.dumps([{"english": "x"}, make_item("ok").to_dict()]))
        assert [item.english for item in self.log.list()] == ["ok"]

    def test_unreadable_history_reads_empty(self):
        """Test invalid JSON is treated as no history."""
        self.store.set(HISTORY_KEY, "{broken")
        assert self.log.list() == []

    def test_custom_cap(self):
        """Test a smaller configured cap."""
        log = HistoryLog(MemoryKeyValueStore(), max_items=2)
        for word in ("a", "b", "c"):
            log.record(make_item(word))
        assert [item.english for item in log.list()] == ["c", "b"]

    def test_invalid_cap(self):
        """Test non-positive caps are rejected."""
        with pytest.raises(ValueError):
            HistoryLog(MemoryKeyValueStore(), max_items=0)
