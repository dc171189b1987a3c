"""Core event store, storage locations, and load results."""

from .config import APP_AUTHOR, APP_NAME, DATA_DIR, STORAGE_FILE_NAME
from .event_store import (
    DEFAULT_EVENTS_KEY,
    CorruptBlob,
    EventStore,
    LoadedEvents,
    LoadResult,
    decode_events,
    encode_events,
)

__all__ = [
    "APP_AUTHOR",
    "APP_NAME",
    "DATA_DIR",
    "DEFAULT_EVENTS_KEY",
    "STORAGE_FILE_NAME",
    "CorruptBlob",
    "EventStore",
    "LoadResult",
    "LoadedEvents",
    "decode_events",
    "encode_events",
]
