from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from ..core.config import APP_AUTHOR, APP_NAME, DATA_DIR, STORAGE_FILE_NAME
from ..core.event_store import DEFAULT_EVENTS_KEY

load_dotenv()


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path
    storage_file: Path
    events_key: str


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    organization: str


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    logging: LoggingSettings
    ui: UiSettings


def _path_from_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if not raw:
        return default
    return Path(raw).expanduser()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    data_dir = _path_from_env("DATEBOOK_DATA_DIR", DATA_DIR)

    storage = StorageSettings(
        data_dir=data_dir,
        storage_file=_path_from_env("DATEBOOK_STORAGE_FILE", data_dir / STORAGE_FILE_NAME),
        events_key=os.getenv("DATEBOOK_EVENTS_KEY", DEFAULT_EVENTS_KEY),
    )

    logging_settings = LoggingSettings(
        level=os.getenv("DATEBOOK_LOG_LEVEL", "INFO").upper(),
        log_dir=_path_from_env("DATEBOOK_LOG_DIR", data_dir / "logs"),
    )

    ui = UiSettings(
        app_name=os.getenv("DATEBOOK_APP_NAME", APP_NAME),
        organization=os.getenv("DATEBOOK_APP_ORG", APP_AUTHOR),
    )

    return AppSettings(storage=storage, logging=logging_settings, ui=ui)
