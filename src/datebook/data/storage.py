from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

import orjson

from ..domain import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dictionary-backed store; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileStore:
    """Persist string blobs in a single JSON object file.

    The file is read lazily on first access and rewritten in full on every
    ``set`` through a temporary sibling, so an interrupted write leaves the
    previous contents in place. A container file that cannot be decoded is
    moved aside to ``<name>.corrupt`` and the store starts empty.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._values: Optional[Dict[str, str]] = None
        self.quarantined_to: Optional[Path] = None

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_materialized(self) -> Dict[str, str]:
        if self._values is not None:
            return self._values
        self._values = {}
        if not self._path.exists():
            return self._values
        raw = self._path.read_bytes()
        if not raw.strip():
            return self._values
        try:
            payload = orjson.loads(raw)
        except orjson.JSONDecodeError:
            payload = None
        if not isinstance(payload, dict):
            backup = self._path.with_name(self._path.name + ".corrupt")
            self._path.replace(backup)
            self.quarantined_to = backup
            logger.warning("Storage file %s is unreadable; moved it to %s", self._path, backup)
            return self._values
        self._values = {str(key): value for key, value in payload.items() if isinstance(value, str)}
        return self._values

    def get(self, key: str) -> Optional[str]:
        return self._ensure_materialized().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._ensure_materialized()
        values[key] = value
        self._write(values)

    def _write(self, values: Dict[str, str]) -> None:
        payload = orjson.dumps(values, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(payload + b"\n")
            tmp.replace(self._path)
        except OSError as exc:
            raise StorageError(f"Could not write {self._path}: {exc}") from exc


__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore"]
