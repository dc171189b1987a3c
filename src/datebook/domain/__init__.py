"""Domain models for the event calendar."""

from __future__ import annotations

from .enums import FormMode
from .errors import (
    DatebookError,
    EventValidationError,
    IncompleteFieldsError,
    InvalidTimeFormatError,
    InvalidTimeRangeError,
    MissingDateContextError,
    StorageError,
)
from .models import EDITABLE_FIELDS, Event, format_date, parse_date
from .validation import check_event_fields, check_submission

__all__ = [
    "DatebookError",
    "EDITABLE_FIELDS",
    "Event",
    "EventValidationError",
    "FormMode",
    "IncompleteFieldsError",
    "InvalidTimeFormatError",
    "InvalidTimeRangeError",
    "MissingDateContextError",
    "StorageError",
    "check_event_fields",
    "check_submission",
    "format_date",
    "parse_date",
]
