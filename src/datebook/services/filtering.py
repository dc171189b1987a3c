from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from ..domain import Event, format_date

EMPTY_LIST_MESSAGE = "No events added yet."


def filter_events(
    events: Iterable[Event],
    *,
    search_query: str = "",
    selected_date: Optional[date] = None,
) -> List[Event]:
    """Return the events to display, in collection order.

    A non-empty query keeps events whose name, date or times contain it
    (case-insensitive). A selected date then narrows to that day.
    """

    visible = list(events)
    if search_query:
        visible = [event for event in visible if event.matches(search_query)]
    if selected_date is not None:
        day = format_date(selected_date)
        visible = [event for event in visible if event.date == day]
    return visible


__all__ = ["EMPTY_LIST_MESSAGE", "filter_events"]
