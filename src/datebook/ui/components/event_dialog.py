from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from ...domain import StorageError
from ...services import ViewController


class EventDialog(QDialog):
    """Event form bound to the controller's fields, error and mode."""

    def __init__(self, controller: ViewController) -> None:
        super().__init__()
        self.controller = controller
        self.setWindowTitle("Add Event")
        layout = QVBoxLayout(self)

        date_label = QLabel(f"Selected Date: {controller.selected_date_label}")
        date_label.setObjectName("muted")
        layout.addWidget(date_label)

        heading = QLabel(controller.dialog_heading)
        heading.setObjectName("title")
        layout.addWidget(heading)

        self.error_label = QLabel("")
        self.error_label.setObjectName("formError")
        layout.addWidget(self.error_label)

        form = QFormLayout()
        fields = controller.fields

        self.name_input = QLineEdit(fields.name)
        self.name_input.setPlaceholderText("Event Name")
        form.addRow("Name", self.name_input)

        self.start_input = QLineEdit(fields.start_time)
        self.start_input.setPlaceholderText("HH:MM")
        form.addRow("Start Time", self.start_input)

        self.end_input = QLineEdit(fields.end_time)
        self.end_input.setPlaceholderText("HH:MM")
        form.addRow("End Time", self.end_input)

        self.desc_input = QLineEdit(fields.desc)
        self.desc_input.setPlaceholderText("Description")
        form.addRow("Description", self.desc_input)
        layout.addLayout(form)

        buttons = QHBoxLayout()
        cancel = QPushButton("Cancel")
        cancel.clicked.connect(self.reject)
        buttons.addWidget(cancel)
        submit = QPushButton(controller.submit_label)
        submit.setDefault(True)
        submit.clicked.connect(self._submit)
        buttons.addWidget(submit)
        layout.addLayout(buttons)

    def _submit(self) -> None:
        self.controller.update_fields(
            name=self.name_input.text().strip(),
            start_time=self.start_input.text().strip(),
            end_time=self.end_input.text().strip(),
            desc=self.desc_input.text().strip(),
        )
        try:
            saved = self.controller.submit()
        except StorageError as exc:
            self.error_label.setText(f"Could not save: {exc}")
            return
        if saved:
            self.accept()
        elif not self.controller.form.is_open:
            # Date context was lost; the controller already closed the form.
            super().reject()
        else:
            self.error_label.setText(self.controller.error)

    def reject(self) -> None:
        self.controller.cancel()
        super().reject()
