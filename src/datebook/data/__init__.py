"""Data access layer."""

from __future__ import annotations

from .cache.date_index import DateIndex
from .storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = ["DateIndex", "JsonFileStore", "KeyValueStore", "MemoryStore"]
