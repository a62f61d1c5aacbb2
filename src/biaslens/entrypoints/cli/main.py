"""BIASLENS CLI entry point.

Defines the top-level ``biaslens`` command (via Click-Extra) and registers
its subcommands.

Available commands
- ``biaslens account`` — register, log in, log out, show the current user.
- ``biaslens templates`` / ``biaslens resources`` — browse the catalogs.
- ``biaslens evaluate APP`` — run the bias protocols against an app and report.
- ``biaslens community APP`` — post reviews and read what others think.
- ``biaslens db`` — forward-only database management for account storage.

Notes
- The CLI version is sourced from `biaslens.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ biaslens account register
    $ biaslens evaluate ChatGPT
"""

import logging
import os
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from biaslens import __version__, config
from biaslens.logging import (
    console_level,
    describe_account_storage,
    log_startup,
    setup_logging,
)

from .account import account as account_group
from .catalog_cmds import resources as resources_cmd
from .catalog_cmds import templates as templates_cmd
from .community import community as community_cmd
from .db import db as db_group
from .evaluate import evaluate as evaluate_cmd
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """BIASLENS command-line interface.

    BIASLENS helps educators check AI products for bias before using them in
    class. Run scripted protocols (gender, cultural, privacy) against an app,
    get a 0-10 score with a recommendation, and share reviews with other
    evaluators.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (source paths and timestamps on every log line).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=Path(user_log_dir("biaslens", appauthor=False)) / "latest.log",
    envvar="BIASLENS_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="BIASLENS_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    envvar="BIASLENS_FLIGHT_RECORDER",
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on exit if --force-flush "
        "is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    envvar="BIASLENS_FORCE_FLUSH_FLIGHT_RECORDER",
    help="Write the flight recorder buffer to --log-path on exit even without warnings.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    envvar="BIASLENS_LOGGER_LEVELS",
    callback=parse_log_level,
    help=(
        "Set the minimum LEVEL for a LOGGER (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L biaslens.service_layer=DEBUG) "
        "or via BIASLENS_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def biaslens(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """BIASLENS command-line interface."""
    level = console_level(verbose_count, quiet_count)
    flight_capacity = flight_recorder_capacity if flight_recorder else None

    handlers = setup_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_capacity=flight_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        storage=describe_account_storage(
            os.environ.get(config.DB_URL_ENV), config.get_storage_dir()
        ),
        data_dir=config.get_data_dir(),
        log_path=log_path,
        flight_capacity=flight_capacity,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


biaslens.add_command(account_group)
biaslens.add_command(templates_cmd)
biaslens.add_command(resources_cmd)
biaslens.add_command(evaluate_cmd)
biaslens.add_command(community_cmd)
biaslens.add_command(db_group)
