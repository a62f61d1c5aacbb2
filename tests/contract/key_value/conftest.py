"""Fixtures for key_value contract tests."""

from collections.abc import Iterable

import pytest

from biaslens.adapters.key_value import (
    LocalKeyValueStore,
    MemoryKeyValueStore,
    SqlAlchemyKeyValueStore,
)
from biaslens.interfaces.key_value_store import KeyValueStore


@pytest.fixture(params=["memory", "local", "sqlalchemy"])
def kv(request: pytest.FixtureRequest, tmp_path) -> Iterable[KeyValueStore]:
    """Yield an empty KeyValueStore for each backend.

    Supported params:
      - `"memory"` → MemoryKeyValueStore
      - `"local"` → LocalKeyValueStore over a temp directory
      - `"sqlalchemy"` → SqlAlchemyKeyValueStore over in-memory SQLite
    """

    match request.param:
        case "memory":
            yield MemoryKeyValueStore()
        case "local":
            yield LocalKeyValueStore(tmp_path / "kv")
        case "sqlalchemy":
            yield SqlAlchemyKeyValueStore(request.getfixturevalue("sqlite_engine_memory"))
        case _:
            raise ValueError(f"unknown key-value store type: {request.param}")
