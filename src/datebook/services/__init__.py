"""Application services: the view controller, filtering, and wiring."""

from __future__ import annotations

from .context import ServiceContext
from .controller import STORAGE_FILE_WARNING, STORAGE_WARNING, FormFields, FormState, ViewController
from .filtering import EMPTY_LIST_MESSAGE, filter_events

__all__ = [
    "EMPTY_LIST_MESSAGE",
    "STORAGE_FILE_WARNING",
    "STORAGE_WARNING",
    "FormFields",
    "FormState",
    "ServiceContext",
    "ViewController",
    "filter_events",
]
