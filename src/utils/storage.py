"""
Local key-value storage backends.

Both stores hold string values under string keys, the same contract as a
browser's localStorage.

Example:
    store = create_store()
    store.set_item("periodTracker", "[]")
    raw = store.get_item("periodTracker")
"""
import os
import json
import tempfile
from typing import Dict, Optional

from src.utils.logging import logger

class KeyValueStore:
    """Base class for string key-value stores."""

    def get_item(self, key: str) -> Optional[str]:
        """
        Get the value stored under key.

        Returns:
            Stored string, or None if the key is absent
        """
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        raise NotImplementedError

class InMemoryKeyValueStore(KeyValueStore):
    """Store that keeps values in a dictionary for the life of the process."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

class JsonFileKeyValueStore(KeyValueStore):
    """
    Store backed by a single JSON object file.

    A missing file reads as an empty store. A file that cannot be read or is
    not a JSON object is logged and also read as empty, so the next write
    replaces it.
    """

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Store file is unreadable, treating as empty", extra={
                "path": self.path,
                "error": str(e)
            })
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file does not hold a JSON object, treating as empty", extra={
                "path": self.path
            })
            return {}
        return data

    def _write(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

def create_store() -> KeyValueStore:
    """
    Create the key-value store configured by the environment.

    Uses a JSON file at PERIOD_TRACKER_STORE_PATH when that variable is set,
    otherwise an in-memory store.
    """
    path = os.environ.get('PERIOD_TRACKER_STORE_PATH')
    if path:
        logger.info("Using file store", extra={"path": path})
        return JsonFileKeyValueStore(path)
    logger.info("PERIOD_TRACKER_STORE_PATH not set, using in-memory store")
    return InMemoryKeyValueStore()
