"""Local filesystem-based key-value store adapter."""

import os
import tempfile
from pathlib import Path

from biaslens.interfaces.key_value_store import (
    KeyValueStore,
    StorageUnavailableError,
    validate_key,
)

SUFFIX = ".json"


class LocalKeyValueStore(KeyValueStore):
    """KeyValueStore that keeps one UTF-8 text file per key under a root directory.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so readers never see a half-written value.
    The root is created on construction and again before each write, so a
    directory removed while the process runs is recreated rather than
    failing every later write.

    Raises:
        StorageUnavailableError: From any operation (including construction)
            whose underlying filesystem call fails.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = Path(root)
        self._ensure_root()

    def get_item(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageUnavailableError(f"Cannot read {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        dest = self._path_for(key)
        self._ensure_root()

        tmp_path: Path | None = None
        try:
            # mkstemp + os.replace keeps the swap atomic on the same filesystem
            fd, tmp_name = tempfile.mkstemp(dir=self._root, suffix=".tmp")
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(value)
            os.replace(tmp_path, dest)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageUnavailableError(f"Cannot write {key!r}: {e}") from e

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageUnavailableError(f"Cannot remove {key!r}: {e}") from e

    # --- Internal Helpers ---

    def _ensure_root(self) -> None:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(
                f"Cannot create storage directory {self._root}: {e}"
            ) from e

    def _path_for(self, key: str) -> Path:
        validate_key(key)
        return self._root / f"{key}{SUFFIX}"
