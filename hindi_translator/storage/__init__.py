"""
Storage layer for Hindi Translator.

Key-value persistence for quota counters and lookup history.
"""

from .store import KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore, initialize_schema

__all__ = ["KeyValueStore", "MemoryKeyValueStore", "SQLiteKeyValueStore", "initialize_schema"]
