from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from ...domain import Event


@dataclass
class DateIndex:
    """In-memory lookup of events by their date string."""

    events_by_id: Dict[str, Event] = field(default_factory=dict)
    days_index: Dict[str, List[str]] = field(default_factory=dict)

    def hydrate(self, events: Iterable[Event]) -> None:
        self.clear()
        for event in events:
            self._index_event(event)

    def _index_event(self, event: Event) -> None:
        self.events_by_id[event.id] = event
        self.days_index.setdefault(event.date, []).append(event.id)

    def upsert(self, event: Event) -> None:
        existing = self.events_by_id.get(event.id)
        if existing is not None and existing.date == event.date:
            self.events_by_id[event.id] = event
            return
        if existing is not None:
            self._remove_event(event.id)
        self._index_event(event)

    def _remove_event(self, event_id: str) -> None:
        event = self.events_by_id.pop(event_id)
        ids = self.days_index.get(event.date, [])
        if event_id in ids:
            ids.remove(event_id)
        if not ids:
            self.days_index.pop(event.date, None)

    def remove(self, event_id: str) -> bool:
        if event_id not in self.events_by_id:
            return False
        self._remove_event(event_id)
        return True

    def events_on(self, day: str) -> List[Event]:
        identifiers = self.days_index.get(day, [])
        return [self.events_by_id[event_id] for event_id in identifiers]

    def dates(self) -> Set[str]:
        return set(self.days_index)

    def clear(self) -> None:
        self.events_by_id.clear()
        self.days_index.clear()
