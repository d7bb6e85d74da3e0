"""
Data models for the translation engine.

Defines resolved translations, quota counters and history entries.
"""

from dataclasses import dataclass
from typing import Any, Dict

# Source label for lexicon hits; remote results carry the provider name.
OFFLINE_SOURCE = "Offline"


@dataclass(frozen=True)
class TranslationRecord:
    """A resolved translation.

    The pronunciation is the Devanagari spelling itself; there is no
    separate phonetic field.
    """
    headword: str
    hindi: str
    romanized: str
    source: str = OFFLINE_SOURCE

    @property
    def pronunciation(self) -> str:
        """Pronunciation shown to the user (always the Hindi spelling)."""
        return self.hindi


@dataclass(frozen=True)
class QuotaState:
    """Daily request counter for the rate-limited provider.

    The count is only meaningful for the stored date.
    """
    date: str
    count: int = 0

    def __post_init__(self):
        """Validate counter value."""
        if self.count < 0:
            raise ValueError("count must be >= 0")

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "count": self.count}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuotaState":
        return cls(date=str(data["date"]), count=int(data["count"]))


@dataclass(frozen=True)
class HistoryItem:
    """A past resolution kept for quick re-lookup."""
    english: str
    hindi: str
    romanized: str
    source: str
    timestamp: str

    @property
    def key(self) -> str:
        """Case-insensitive identity used for de-duplication."""
        return self.english.strip().lower()

    def to_dict(self) -> Dict[str, str]:
        return {
            "english": self.english,
            "hindi": self.hindi,
            "romanized": self.romanized,
            "source": self.source,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryItem":
        return cls(
            english=str(data["english"]),
            hindi=str(data["hindi"]),
            romanized=str(data["romanized"]),
            source=str(data["source"]),
            timestamp=str(data["timestamp"]),
        )
