from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#0b1120"
    background_secondary: str = "#111a2e"
    surface: str = "#16213a"
    accent_primary: str = "#60a5fa"
    accent_secondary: str = "#fbbf24"
    accent_error: str = "#f87171"
    text_primary: str = "#f1f5f9"
    text_secondary: str = "#94a3b8"
    border_subtle: str = "#1e293b"
    border_strong: str = "#334155"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the Qt application."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: {self.background_primary};
            border: none;
            padding: 8px 14px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QPushButton#editButton {{
            background-color: {self.accent_secondary};
        }}
        QPushButton#deleteButton {{
            background-color: {self.accent_error};
        }}
        QLineEdit, QTextEdit {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 8px;
            padding: 8px 10px;
        }}
        QLineEdit:focus, QTextEdit:focus {{
            border-color: {self.accent_primary};
        }}
        QListView, QCalendarWidget QTableView {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_strong};
            selection-background-color: {self.accent_primary};
            selection-color: {self.background_primary};
        }}
        QWidget#calendarPanel {{
            background-color: {self.surface};
        }}
        QLabel#title {{
            font-size: 20px;
            font-weight: 700;
        }}
        QLabel#muted {{
            color: {self.text_secondary};
        }}
        QLabel#formError {{
            color: {self.accent_error};
            font-size: 12px;
        }}
        """
