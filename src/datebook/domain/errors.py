"""Error types raised by the event store and reported by the view controller."""

from __future__ import annotations


class DatebookError(Exception):
    """Base class for application errors."""


class EventValidationError(DatebookError, ValueError):
    message = "Invalid event."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingDateContextError(EventValidationError):
    message = "Please Refresh the page and select the date"


class IncompleteFieldsError(EventValidationError):
    message = "Please fill out all fields!"


class InvalidTimeFormatError(EventValidationError):
    message = "Times must use the 24-hour HH:MM format!"


class InvalidTimeRangeError(EventValidationError):
    message = "Start time must be earlier than end time!"


class StorageError(DatebookError):
    """Raised when the storage file cannot be written."""


__all__ = [
    "DatebookError",
    "EventValidationError",
    "IncompleteFieldsError",
    "InvalidTimeFormatError",
    "InvalidTimeRangeError",
    "MissingDateContextError",
    "StorageError",
]
