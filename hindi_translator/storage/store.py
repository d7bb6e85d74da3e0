"""
Key-value persistence.

Values are JSON strings keyed by name, in the manner of a browser's local
storage. The SQLite store is the default; the in-memory store serves tests
and embedding callers.
"""

from typing import Dict, Optional, Protocol

from .db import get_connection

HISTORY_KEY = "translationHistory"
QUOTA_KEY = "requestCount"


class KeyValueStore(Protocol):
    """Minimal string store injected into the quota tracker and history log."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryKeyValueStore:
    """Dictionary-backed store; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SQLiteKeyValueStore:
    """Store backed by a single SQLite table.

    Each call opens and closes its own connection so the store can be
    shared freely.
    """

    def __init__(self, db_path: str = "hindi_translator.db"):
        """Initialize the store and make sure its table exists.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        initialize_schema(db_path)

    def get(self, key: str) -> Optional[str]:
        """Return the stored value for key, or None when absent."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT value FROM key_value WHERE key = ?", (key,)
            )
            row = cursor.fetchone()
            return row[0] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value for key."""
        conn = get_connection(self.db_path)
        try:
            conn.execute("""
                INSERT INTO key_value (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """, (key, value))
            conn.commit()
        finally:
            conn.close()


def initialize_schema(db_path: str = "hindi_translator.db") -> None:
    """Create the key_value table if it doesn't exist.

    Args:
        db_path: Path to SQLite database file
    """
    conn = get_connection(db_path)
    try:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS key_value (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        conn.commit()
    finally:
        conn.close()
