"""In-memory key-value store.

Meant for tests, examples and ephemeral sessions. Values are kept in a dict
guarded by a re-entrant lock; nothing survives the process.
"""

from __future__ import annotations

import threading

from biaslens.interfaces.key_value_store import KeyValueStore, validate_key

__all__ = ["MemoryKeyValueStore"]


class MemoryKeyValueStore(KeyValueStore):
    """KeyValueStore backed by a plain dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    def get_item(self, key: str) -> str | None:
        validate_key(key)
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        validate_key(key)
        with self._lock:
            self._items[key] = value

    def remove_item(self, key: str) -> None:
        validate_key(key)
        with self._lock:
            self._items.pop(key, None)
