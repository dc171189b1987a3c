"""Shared fixtures for the Datebook test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from datebook.config import get_settings
from datebook.core import EventStore
from datebook.data import MemoryStore
from datebook.domain import Event
from datebook.services import ViewController


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point every configurable location at a per-test directory."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("DATEBOOK_DATA_DIR", str(data_dir))
    for name in ("DATEBOOK_STORAGE_FILE", "DATEBOOK_EVENTS_KEY", "DATEBOOK_LOG_DIR", "DATEBOOK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield data_dir
    get_settings.cache_clear()


@pytest.fixture
def backend() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def store(backend: MemoryStore) -> EventStore:
    event_store = EventStore(backend)
    event_store.load()
    return event_store


@pytest.fixture
def controller(store: EventStore) -> ViewController:
    return ViewController(store)


@pytest.fixture
def standup() -> Event:
    return Event.new(date="1/1/2024", name="Standup", start_time="09:00", end_time="09:15")


@pytest.fixture
def review() -> Event:
    return Event.new(date="1/2/2024", name="Review", start_time="14:00", end_time="15:00")
