"""Logging setup for the BIASLENS CLI.

Console output goes through Rich on stderr, at a level picked with ``-v`` and
``-q``. Alongside it a "flight recorder" keeps the most recent records at
DEBUG in memory and writes them to the log file once a WARNING or worse is
seen, so a failed sign-in or evaluation can be looked at after the fact
without running everything verbosely.

Records from the libraries BIASLENS drives (SQLAlchemy for account storage,
Alembic for ``biaslens db``, Click-Extra for the CLI) are tagged on the
console so they stand apart from the application's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from logging import Logger

# pylint: disable=too-few-public-methods

APP_LOGGER = "biaslens"

# console tags for libraries BIASLENS drives; any other package shows its own name
LIBRARY_TAGS = {
    "sqlalchemy": "db",
    "alembic": "migrations",
    "click_extra": "cli",
}

BASE_LEVEL = logging.WARNING

FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class LibraryTagFilter(logging.Filter):
    """Set ``record.tag`` for console formatting.

    BIASLENS records get an empty tag. Library records get a short bracketed
    tag followed by a space, e.g. ``"[db] "`` for ``sqlalchemy.engine.Engine``.
    Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.split(".", 1)[0]
        if package == APP_LOGGER:
            record.tag = ""
        else:
            record.tag = f"[{LIBRARY_TAGS.get(package, package)}] "
        return True


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` counts onto a logging level, starting from WARNING."""
    level = BASE_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    In debug mode everything down to DEBUG is shown with timestamps, logger
    names and source paths; otherwise lines carry only the library tag.
    """

    # same choices as click-extra's --color / --no-color
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(tag)s%(message)s"))
        handler.addFilter(LibraryTagFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a MemoryHandler that buffers records for the log file at ``path``.

    The buffer goes to disk when it holds ``capacity`` records, when a record
    at ``flush_level`` or above arrives, or (with ``flush_on_close``) when
    logging shuts down. The file is rewritten on each run and only created
    on the first flush.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def setup_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_capacity: int | None = None,
    force_flush: bool = False,
    logger_levels: Mapping[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console handler, plus the flight recorder when it has a capacity.

    The root logger passes everything through and each handler applies its
    own level; ``logger_levels`` then raises or lowers individual loggers for
    both. Returns the installed handlers.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if flight_capacity is not None and log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=flight_capacity, flush_on_close=force_flush
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


@dataclass(frozen=True)
class AccountStorage:
    """Where accounts and the signed-in session are kept, for display."""

    backend: Literal["database", "local"]
    location: str


def describe_account_storage(db_url: str | None, storage_dir: Path) -> AccountStorage:
    """Describe the key-value backend bootstrap will pick, without connecting.

    Database passwords are masked; an unparseable URL is reported as such
    rather than echoed.
    """
    if not db_url:
        return AccountStorage("local", str(storage_dir))
    try:
        location = make_url(db_url).render_as_string(hide_password=True)
    except ArgumentError:
        location = "<unparseable BIASLENS_DB_URL>"
    return AccountStorage("database", location)


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    storage: AccountStorage,
    data_dir: Path,
    log_path: Path | None,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: Mapping[str, int],
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics.

    The summary names the version, console level, flight-recorder state and
    account backend. The diagnostics cover the interpreter, the data
    directory and account storage location, the handlers, the flight
    recorder and per-logger overrides.
    """
    logger.info(
        "BIASLENS %s - console=%s, flight-recorder=%s, accounts=%s",
        app_version,
        logging.getLevelName(level),
        "OFF" if flight_capacity is None else "ON",
        storage.backend,
    )

    logger.debug(
        "Python: %s on %s %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
    )
    logger.debug("PID: %s, CWD: %s", os.getpid(), Path.cwd())
    logger.debug("Data dir: %s", data_dir)
    logger.debug("Account storage: %s (%s)", storage.location, storage.backend)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_capacity is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
