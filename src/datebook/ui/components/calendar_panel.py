from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Set

from PyQt6.QtCore import QDate, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QTextCharFormat
from PyQt6.QtWidgets import (
    QCalendarWidget,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...domain import Event

MARKER_COLOR = "#fbbf24"


def _event_label(event: Event) -> str:
    lines = [
        f"Date: {event.date}",
        event.name,
        f"Start Time: {event.start_time}",
        f"End Time: {event.end_time}",
    ]
    if event.desc:
        lines.append(f"Description: {event.desc}")
    return "\n".join(lines)


class CalendarPanel(QWidget):
    date_selected = pyqtSignal(object)
    search_changed = pyqtSignal(str)
    add_requested = pyqtSignal()
    edit_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(24)

        self.calendar_widget = QCalendarWidget()
        self.calendar_widget.setGridVisible(False)
        self.calendar_widget.clicked.connect(self._emit_date_selected)
        layout.addWidget(self.calendar_widget, alignment=Qt.AlignmentFlag.AlignTop)

        column = QVBoxLayout()
        heading = QLabel("Events")
        heading.setObjectName("title")
        column.addWidget(heading)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search Event")
        self.search_input.textChanged.connect(self.search_changed)
        column.addWidget(self.search_input)

        self.event_list = QListWidget()
        self.event_list.itemSelectionChanged.connect(self._sync_actions)
        column.addWidget(self.event_list, stretch=1)

        self.empty_label = QLabel("")
        self.empty_label.setObjectName("muted")
        column.addWidget(self.empty_label)

        actions = QHBoxLayout()
        self.edit_button = QPushButton("Edit")
        self.edit_button.setObjectName("editButton")
        self.edit_button.clicked.connect(lambda: self._emit_for_current(self.edit_requested))
        actions.addWidget(self.edit_button)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setObjectName("deleteButton")
        self.delete_button.clicked.connect(lambda: self._emit_for_current(self.delete_requested))
        actions.addWidget(self.delete_button)

        self.add_button = QPushButton("Add Event")
        self.add_button.clicked.connect(self.add_requested)
        actions.addWidget(self.add_button)
        column.addLayout(actions)

        layout.addLayout(column, stretch=1)
        self._marked: Set[date] = set()

    def populate_events(self, events: Iterable[Event], *, empty_message: str) -> None:
        self.event_list.clear()
        count = 0
        for event in events:
            item = QListWidgetItem(_event_label(event))
            item.setData(Qt.ItemDataRole.UserRole, event.id)
            self.event_list.addItem(item)
            count += 1
        self.empty_label.setText("" if count else empty_message)
        self._sync_actions()

    def mark_dates(self, days: Iterable[date]) -> None:
        for day in self._marked:
            self.calendar_widget.setDateTextFormat(QDate(day.year, day.month, day.day), QTextCharFormat())
        marker = QTextCharFormat()
        marker.setForeground(QBrush(QColor(MARKER_COLOR)))
        marker.setFontUnderline(True)
        self._marked = set(days)
        for day in self._marked:
            self.calendar_widget.setDateTextFormat(QDate(day.year, day.month, day.day), marker)

    def set_add_enabled(self, enabled: bool) -> None:
        self.add_button.setVisible(enabled)

    def current_event_id(self) -> Optional[str]:
        selected = self.event_list.selectedItems()
        if not selected:
            return None
        return selected[0].data(Qt.ItemDataRole.UserRole)

    def _emit_for_current(self, signal) -> None:
        event_id = self.current_event_id()
        if event_id is not None:
            signal.emit(event_id)

    def _sync_actions(self) -> None:
        has_selection = bool(self.event_list.selectedItems())
        self.edit_button.setEnabled(has_selection)
        self.delete_button.setEnabled(has_selection)

    def _emit_date_selected(self, qdate: QDate) -> None:
        self.date_selected.emit(date(qdate.year(), qdate.month(), qdate.day()))
