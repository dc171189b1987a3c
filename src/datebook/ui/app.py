from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from PyQt6.QtWidgets import QApplication

from ..config import AppPalette, get_settings
from ..data import KeyValueStore
from ..services import ServiceContext
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui(*, storage_path: Optional[Path] = None, backend: Optional[KeyValueStore] = None) -> None:
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    app.setApplicationName(settings.ui.app_name)
    app.setOrganizationName(settings.ui.organization)
    apply_palette(app, AppPalette())

    context = ServiceContext(settings=settings, backend=backend, storage_path=storage_path)
    window = MainWindow(context=context, settings=settings)
    window.show()
    sys.exit(app.exec())
