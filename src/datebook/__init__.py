"""Datebook application package."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .data import KeyValueStore

__all__ = ["main", "run_gui"]


def run_gui(*, storage_path: Optional[Path] = None, backend: Optional[KeyValueStore] = None) -> None:
    from .ui.app import run_gui as _run_gui

    _run_gui(storage_path=storage_path, backend=backend)


def main() -> None:
    from .cli import main as cli_main

    raise SystemExit(cli_main())
