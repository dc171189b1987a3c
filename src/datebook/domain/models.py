from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Mapping
from uuid import uuid4

EDITABLE_FIELDS = ("name", "start_time", "end_time", "desc")


def format_date(day: date) -> str:
    """Render ``day`` the way the calendar stores it, e.g. ``1/2/2024``."""

    return f"{day.month}/{day.day}/{day.year}"


def parse_date(value: str) -> date:
    month, day, year = (int(part) for part in value.split("/"))
    return date(year, month, day)


def _require_text(record: Mapping[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise ValueError(f"Field {key!r} must be a string, got {value!r}")
    return value


def _optional_text(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Field {key!r} must be a string, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class Event:
    id: str
    date: str
    name: str
    start_time: str
    end_time: str
    desc: str = ""

    @classmethod
    def new(cls, *, date: str, name: str, start_time: str, end_time: str, desc: str = "") -> "Event":
        return cls(
            id=uuid4().hex,
            date=date,
            name=name,
            start_time=start_time,
            end_time=end_time,
            desc=desc,
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Event":
        """Build an event from its persisted form.

        Records written before ids existed are given a fresh one.
        """

        if not isinstance(record, Mapping):
            raise ValueError(f"Event record must be an object, got {record!r}")
        identifier = record.get("id") or uuid4().hex
        return cls(
            id=str(identifier),
            date=_require_text(record, "date"),
            name=_require_text(record, "name"),
            start_time=_require_text(record, "startTime"),
            end_time=_require_text(record, "endTime"),
            desc=_optional_text(record, "desc"),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "name": self.name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "desc": self.desc,
        }

    def with_changes(self, patch: Mapping[str, str]) -> "Event":
        unknown = set(patch) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot change event fields: {', '.join(sorted(unknown))}")
        return replace(self, **patch)

    def matches(self, query: str) -> bool:
        needle = query.lower()
        return any(
            needle in value.lower()
            for value in (self.name, self.date, self.start_time, self.end_time)
        )
