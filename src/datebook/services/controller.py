from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Set

from ..core import CorruptBlob, EventStore, LoadResult
from ..domain import (
    Event,
    EventValidationError,
    FormMode,
    MissingDateContextError,
    check_submission,
    format_date,
    parse_date,
)
from .filtering import EMPTY_LIST_MESSAGE, filter_events

logger = logging.getLogger(__name__)

STORAGE_WARNING = "Saved events could not be read and were set aside. Starting with an empty calendar."
STORAGE_FILE_WARNING = "The storage file could not be read and was moved to {path}. Starting with an empty calendar."


@dataclass(frozen=True)
class FormState:
    mode: FormMode = FormMode.CLOSED
    event_id: Optional[str] = None

    @classmethod
    def closed(cls) -> "FormState":
        return cls()

    @classmethod
    def creating(cls) -> "FormState":
        return cls(mode=FormMode.CREATING)

    @classmethod
    def editing(cls, event_id: str) -> "FormState":
        return cls(mode=FormMode.EDITING, event_id=event_id)

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.CLOSED


@dataclass
class FormFields:
    name: str = ""
    start_time: str = ""
    end_time: str = ""
    desc: str = ""

    @classmethod
    def from_event(cls, event: Event) -> "FormFields":
        return cls(name=event.name, start_time=event.start_time, end_time=event.end_time, desc=event.desc)


class ViewController:
    """Transient UI state for the calendar view and its event form.

    The controller validates form submissions before handing them to the
    :class:`EventStore`, and derives the visible event list from the current
    date selection and search query.
    """

    def __init__(self, store: EventStore, *, load_result: Optional[LoadResult] = None) -> None:
        self.store = store
        self.selected_date: Optional[date] = None
        self.form = FormState.closed()
        self.fields = FormFields()
        self.error = ""
        self.search_query = ""
        self.storage_warning: Optional[str] = None
        if isinstance(load_result, CorruptBlob):
            self.storage_warning = STORAGE_WARNING

    # ------------------------------------------------------------------ selection

    def select_date(self, day: date) -> None:
        self.selected_date = day
        self._open(FormState.creating())

    @property
    def can_add_event(self) -> bool:
        return self.selected_date is not None

    def open_create(self) -> bool:
        if not self.can_add_event:
            logger.debug("Ignoring add request without a selected date")
            return False
        self._open(FormState.creating())
        return True

    def begin_edit(self, event_id: str) -> bool:
        event = self.store.get(event_id)
        if event is None:
            logger.warning("Cannot edit unknown event %s", event_id)
            return False
        self.form = FormState.editing(event_id)
        self.fields = FormFields.from_event(event)
        self.error = ""
        return True

    def update_fields(self, **values: str) -> None:
        for key, value in values.items():
            if not hasattr(self.fields, key):
                raise AttributeError(f"Unknown form field {key!r}")
            setattr(self.fields, key, value)

    def set_search(self, query: str) -> None:
        self.search_query = query

    # ------------------------------------------------------------------ form lifecycle

    def submit(self) -> bool:
        fields = self.fields
        selected_date = self.selected_date
        try:
            check_submission(selected_date, fields.name, fields.start_time, fields.end_time)
        except MissingDateContextError as exc:
            self.form = FormState.closed()
            self.error = exc.message
            return False
        except EventValidationError as exc:
            logger.debug("Rejected event form: %s", exc.message)
            self.error = exc.message
            return False

        if self.form.mode is FormMode.EDITING and self.form.event_id is not None:
            self.store.update(
                self.form.event_id,
                {
                    "name": fields.name,
                    "start_time": fields.start_time,
                    "end_time": fields.end_time,
                    "desc": fields.desc,
                },
            )
        else:
            self.store.create(
                Event.new(
                    date=format_date(selected_date),
                    name=fields.name,
                    start_time=fields.start_time,
                    end_time=fields.end_time,
                    desc=fields.desc,
                )
            )
        self._close()
        return True

    def cancel(self) -> None:
        self._close()

    def delete(self, event_id: str) -> None:
        self.store.delete(event_id)
        if self.form.event_id == event_id:
            self._close()

    def _open(self, state: FormState) -> None:
        self.form = state
        self.fields = FormFields()
        self.error = ""

    def _close(self) -> None:
        self.form = FormState.closed()
        self.fields = FormFields()
        self.error = ""

    # ------------------------------------------------------------------ derived view

    @property
    def selected_date_label(self) -> str:
        return format_date(self.selected_date) if self.selected_date else ""

    @property
    def dialog_heading(self) -> str:
        return "Edit Event" if self.form.mode is FormMode.EDITING else "Add New Event"

    @property
    def submit_label(self) -> str:
        return "Update Event" if self.form.mode is FormMode.EDITING else "Save Event"

    @property
    def empty_message(self) -> str:
        return EMPTY_LIST_MESSAGE

    def visible_events(self) -> List[Event]:
        return filter_events(
            self.store.events,
            search_query=self.search_query,
            selected_date=self.selected_date,
        )

    def marked_dates(self) -> Set[date]:
        marked: Set[date] = set()
        for value in self.store.marked_dates():
            try:
                marked.add(parse_date(value))
            except ValueError:
                logger.debug("Skipping calendar marker for unparseable date %r", value)
        return marked


__all__ = ["FormFields", "FormState", "STORAGE_FILE_WARNING", "STORAGE_WARNING", "ViewController"]
