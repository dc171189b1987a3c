from __future__ import annotations

from datetime import date

from PyQt6.QtWidgets import QMainWindow, QMessageBox

from ..config.settings import AppSettings
from ..domain import StorageError
from ..services import ServiceContext
from .components.calendar_panel import CalendarPanel
from .components.event_dialog import EventDialog


class MainWindow(QMainWindow):
    def __init__(self, *, context: ServiceContext, settings: AppSettings) -> None:
        super().__init__()
        self.context = context
        self.controller = context.controller
        self.settings = settings

        self.setWindowTitle(f"{settings.ui.app_name} - Calendar")
        self.resize(1100, 640)

        self.calendar_panel = CalendarPanel()
        self.setCentralWidget(self.calendar_panel)

        self.calendar_panel.date_selected.connect(self.select_date)
        self.calendar_panel.search_changed.connect(self.search)
        self.calendar_panel.add_requested.connect(self.create_event)
        self.calendar_panel.edit_requested.connect(self.edit_event)
        self.calendar_panel.delete_requested.connect(self.delete_event)

        self.refresh()
        if self.controller.storage_warning:
            self.statusBar().showMessage(self.controller.storage_warning)

    # ------------------------------------------------------------------ view

    def refresh(self) -> None:
        self.calendar_panel.populate_events(
            self.controller.visible_events(),
            empty_message=self.controller.empty_message,
        )
        self.calendar_panel.mark_dates(self.controller.marked_dates())
        self.calendar_panel.set_add_enabled(self.controller.can_add_event)

    def search(self, query: str) -> None:
        self.controller.set_search(query)
        self.refresh()

    # ------------------------------------------------------------------ form

    def select_date(self, day: date) -> None:
        self.controller.select_date(day)
        self.refresh()
        self._run_dialog()

    def create_event(self) -> None:
        if self.controller.open_create():
            self._run_dialog()

    def edit_event(self, event_id: str) -> None:
        if self.controller.begin_edit(event_id):
            self._run_dialog()

    def delete_event(self, event_id: str) -> None:
        try:
            self.controller.delete(event_id)
        except StorageError as exc:
            self._handle_error(exc)
        self.refresh()

    def _run_dialog(self) -> None:
        dialog = EventDialog(self.controller)
        if dialog.exec() == EventDialog.DialogCode.Accepted:
            self.statusBar().showMessage("Event saved.", 3000)
        elif self.controller.error:
            self.statusBar().showMessage(self.controller.error, 5000)
        self.refresh()

    # ------------------------------------------------------------------ misc

    def _handle_error(self, exc: Exception) -> None:
        self.statusBar().showMessage(f"Error: {exc}", 5000)
        QMessageBox.critical(self, "Error", str(exc))
