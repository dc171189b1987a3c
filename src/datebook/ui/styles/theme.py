from __future__ import annotations

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from ...config import AppPalette

Role = QPalette.ColorRole


def build_palette(palette: AppPalette) -> QPalette:
    colors = {
        Role.Window: palette.background_primary,
        Role.Base: palette.background_secondary,
        Role.AlternateBase: palette.surface,
        Role.Text: palette.text_primary,
        Role.WindowText: palette.text_primary,
        Role.PlaceholderText: palette.text_secondary,
        Role.Button: palette.accent_primary,
        Role.Highlight: palette.accent_primary,
        Role.HighlightedText: palette.background_primary,
    }
    qt_palette = QPalette()
    for role, value in colors.items():
        qt_palette.setColor(role, QColor(value))
    return qt_palette


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    app.setPalette(build_palette(palette))
    app.setStyleSheet(palette.as_stylesheet())
