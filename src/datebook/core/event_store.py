from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Mapping, Optional, Set, Union
from uuid import uuid4

import orjson

from ..data import DateIndex, KeyValueStore
from ..domain import Event, StorageError
from ..domain.validation import check_event_fields

logger = logging.getLogger(__name__)

DEFAULT_EVENTS_KEY = "events"


@dataclass(frozen=True)
class LoadedEvents:
    events: List[Event] = field(default_factory=list)


@dataclass(frozen=True)
class CorruptBlob:
    raw: str
    reason: str


LoadResult = Union[LoadedEvents, CorruptBlob]


def decode_events(raw: str) -> List[Event]:
    payload = orjson.loads(raw)
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of events, got {type(payload).__name__}")
    events: List[Event] = []
    seen: Set[str] = set()
    for record in payload:
        event = Event.from_record(record)
        check_event_fields(event.name, event.start_time, event.end_time)
        if event.id in seen:
            event = replace(event, id=uuid4().hex)
        seen.add(event.id)
        events.append(event)
    return events


def encode_events(events: List[Event]) -> str:
    return orjson.dumps([event.to_record() for event in events]).decode("utf-8")


class EventStore:
    """Authoritative event collection, written through to a key-value store.

    Every mutation rewrites the whole collection under ``key``.
    """

    def __init__(self, backend: KeyValueStore, *, key: str = DEFAULT_EVENTS_KEY) -> None:
        self._backend = backend
        self._key = key
        self._events: List[Event] = []
        self._index = DateIndex()

    @property
    def key(self) -> str:
        return self._key

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    def load(self) -> LoadResult:
        raw = self._backend.get(self._key)
        if raw is None:
            result: LoadResult = LoadedEvents()
        else:
            try:
                result = LoadedEvents(decode_events(raw))
            except (orjson.JSONDecodeError, ValueError, KeyError) as exc:
                logger.warning("Stored events under %r are unreadable: %s", self._key, exc)
                result = CorruptBlob(raw=raw, reason=str(exc))
        self._replace(result.events if isinstance(result, LoadedEvents) else [])
        logger.debug("Loaded %d events", len(self._events))
        if isinstance(result, LoadedEvents) and raw is not None and encode_events(self._events) != raw:
            # Older records carry no ids; write the assigned ones back so they stay stable.
            try:
                self.persist()
            except StorageError as exc:
                logger.error("Could not rewrite stored events: %s", exc)
            else:
                logger.info("Rewrote %d stored events in the current format", len(self._events))
        return result

    def quarantine(self, raw: str) -> str:
        backup_key = f"{self._key}.corrupt"
        self._backend.set(backup_key, raw)
        logger.info("Saved unreadable events blob under %r", backup_key)
        return backup_key

    def persist(self) -> None:
        self._backend.set(self._key, encode_events(self._events))

    def get(self, event_id: str) -> Optional[Event]:
        return self._index.events_by_id.get(event_id)

    def events_on(self, day: str) -> List[Event]:
        return self._index.events_on(day)

    def marked_dates(self) -> Set[str]:
        return self._index.dates()

    def create(self, event: Event) -> List[Event]:
        check_event_fields(event.name, event.start_time, event.end_time)
        self._events.append(event)
        self._index.upsert(event)
        self.persist()
        logger.info("Created event %s on %s", event.id, event.date)
        return self.events

    def update(self, event_id: str, patch: Mapping[str, str]) -> List[Event]:
        for position, existing in enumerate(self._events):
            if existing.id == event_id:
                break
        else:
            logger.warning("Cannot update unknown event %s", event_id)
            return self.events
        updated = existing.with_changes(patch)
        check_event_fields(updated.name, updated.start_time, updated.end_time)
        self._events[position] = updated
        self._index.upsert(updated)
        self.persist()
        logger.info("Updated event %s", event_id)
        return self.events

    def delete(self, event_id: str) -> List[Event]:
        if not self._index.remove(event_id):
            logger.warning("Cannot delete unknown event %s", event_id)
            return self.events
        self._events = [event for event in self._events if event.id != event_id]
        self.persist()
        logger.info("Deleted event %s", event_id)
        return self.events

    def _replace(self, events: List[Event]) -> None:
        self._events = list(events)
        self._index.hydrate(self._events)


__all__ = [
    "CorruptBlob",
    "DEFAULT_EVENTS_KEY",
    "EventStore",
    "LoadResult",
    "LoadedEvents",
    "decode_events",
    "encode_events",
]
