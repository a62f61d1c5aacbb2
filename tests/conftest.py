"""Global pytest fixtures for BIASLENS."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.records",
]


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep tests away from the developer's real database, data and log directories."""
    monkeypatch.delenv("BIASLENS_DB_URL", raising=False)
    monkeypatch.setenv("BIASLENS_DATA_DIR", str(tmp_path / "biaslens-data"))
    monkeypatch.setenv("BIASLENS_LOG_PATH", str(tmp_path / "logs" / "latest.log"))
