"""Configuration utilities for BIASLENS.

This module centralizes small helpers and constants related to application
configuration. Everything is read from the environment.
"""

import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import TextIO

from alembic.config import Config
from platformdirs import user_data_dir

APP_NAME = "biaslens"

DB_URL_ENV = "BIASLENS_DB_URL"
DATA_DIR_ENV = "BIASLENS_DATA_DIR"

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate

STORAGE_DIRNAME = "storage"


class DatabaseUrlNotSetError(Exception):
    """Raised when the BIASLENS_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `BIASLENS_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `BIASLENS_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_data_dir() -> Path:
    """Return the directory holding locally persisted data.

    `BIASLENS_DATA_DIR` wins when set; otherwise the platform's per-user data
    directory is used (e.g. ``~/.local/share/biaslens`` on Linux).
    """
    if override := os.environ.get(DATA_DIR_ENV):
        return Path(override)
    return Path(user_data_dir(APP_NAME, appauthor=False))


def get_storage_dir() -> Path:
    """Return the directory used by the local key-value store."""
    return get_data_dir() / STORAGE_DIRNAME


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for BIASLENS's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → BIASLENS's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///biaslens.db`). Can be
            `None` (default) only where Alembic won't need to connect to the DB.
        stdout: Text stream Alembic will write status lines to. Defaults to
            `sys.stdout`; override in tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to BIASLENS's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("biaslens.adapters.db.alembic")),
    )
    return cfg
