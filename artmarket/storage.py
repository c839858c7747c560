"""
Local key/value persistence.

Plays the role browser local storage plays for a web client: a handful of
string values (auth token, serialized wishlist) that survive restarts.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class LocalStore(Protocol):
    """String key/value store."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryLocalStore:
    """In-process store. Contents are lost when the object goes away."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileLocalStore:
    """
    Store backed by a single JSON object on disk.

    The file is read lazily on first access and rewritten in full on every
    write. Parent directories are created on demand. A file that is not a
    JSON object is logged and treated as empty; the next write replaces it.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._items: dict[str, str] | None = None

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Local store at {self.path} is not a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def _load(self) -> dict[str, str]:
        if self._items is not None:
            return self._items

        try:
            self._items = self._read()
        except ValueError as e:
            logger.warning("Ignoring unreadable local store at %s: %s", self.path, e)
            self._items = {}

        return self._items

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._load(), f)
        logger.debug("Saved local store to %s", self.path)

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        self._load()[key] = value
        self._save()

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._save()
