from __future__ import annotations

import re
from datetime import date
from typing import Optional

from .errors import (
    IncompleteFieldsError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    MissingDateContextError,
)

_TIME_PATTERN = re.compile(r"(?:[01]\d|2[0-3]):[0-5]\d")


def check_event_fields(name: str, start_time: str, end_time: str) -> None:
    """Raise the first validation error that applies to the given fields.

    Times are compared as ``HH:MM`` strings, which orders correctly once the
    format is enforced.
    """

    if not name or not start_time or not end_time:
        raise IncompleteFieldsError()
    if not _TIME_PATTERN.fullmatch(start_time) or not _TIME_PATTERN.fullmatch(end_time):
        raise InvalidTimeFormatError()
    if start_time >= end_time:
        raise InvalidTimeRangeError()


def check_submission(
    selected_date: Optional[date],
    name: str,
    start_time: str,
    end_time: str,
) -> None:
    if selected_date is None:
        raise MissingDateContextError()
    check_event_fields(name, start_time, end_time)


__all__ = ["check_event_fields", "check_submission"]
