from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import AppSettings, get_settings
from ..core import CorruptBlob, EventStore, LoadResult
from ..data import JsonFileStore, KeyValueStore
from .controller import STORAGE_FILE_WARNING, ViewController

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root wiring settings, storage, the event store and the controller."""

    settings: AppSettings = field(default_factory=get_settings)
    backend: Optional[KeyValueStore] = None
    storage_path: Optional[Path] = None
    store: EventStore = field(init=False)
    controller: ViewController = field(init=False)
    load_result: LoadResult = field(init=False)

    def __post_init__(self) -> None:
        if self.backend is None:
            path = self.storage_path or self.settings.storage.storage_file
            self.backend = JsonFileStore(path)
            logger.debug("Using storage file %s", path)
        self.store = EventStore(self.backend, key=self.settings.storage.events_key)
        self.load_result = self.store.load()
        if isinstance(self.load_result, CorruptBlob):
            self.store.quarantine(self.load_result.raw)
        self.controller = ViewController(self.store, load_result=self.load_result)
        if isinstance(self.backend, JsonFileStore) and self.backend.quarantined_to is not None:
            self.controller.storage_warning = STORAGE_FILE_WARNING.format(path=self.backend.quarantined_to)
