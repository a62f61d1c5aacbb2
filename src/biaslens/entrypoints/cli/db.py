"""BIASLENS DB CLI — forward-only Alembic wrappers for account storage.

Accounts are kept in a database only when ``BIASLENS_DB_URL`` is set; these
commands create and inspect the schema of that database. There is no
``downgrade`` or ``stamp``.

Behavior
- Programmatic Alembic configuration; notices go to **stderr** and Alembic's
  own output to **stdout**.
- ``upgrade`` asks for confirmation unless ``--force`` or ``--sql`` is given.

Failure modes
- Missing/invalid ``BIASLENS_DB_URL`` or unreachable DB → ``ClickException``
  with guidance.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from biaslens import config
from biaslens.adapters.db.engine import make_engine

from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MISSING_DB_URL_MSG = (
    "BIASLENS_DB_URL is not set.\n\n"
    "Accounts are stored in local files unless a database is configured, e.g.:\n"
    "  export BIASLENS_DB_URL='sqlite:///biaslens.db'\n"
    "  or in PowerShell:\n"
    "  $env:BIASLENS_DB_URL='sqlite:///biaslens.db'"
)

INVALID_URL_FORMAT_MSG = (
    "The value of BIASLENS_DB_URL is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "BIASLENS_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the account storage schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'biaslens db upgrade' to update the schema."

VERBOSE_OPTION = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    help="Show alembic's more verbose output.",
)


def _check_connection(url: str) -> None:
    engine = make_engine(url)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))  # pragma: no mutate


def _get_url() -> str:
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        _check_connection(url)
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    return url


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Account storage database commands."""


@db.command()
@VERBOSE_OPTION
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=_get_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@VERBOSE_OPTION
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@VERBOSE_OPTION
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Indicate the current revision.",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    db_url = _get_url() if indicate_current else None
    cfg = config.build_alembic_config(db_url=db_url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = _get_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(cfg, revision="head", sql=sql)
    success("Upgrade complete!")


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    return ScriptDirectory.from_config(cfg).get_current_head()


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        engine = make_engine(_get_url())
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.message)
        raise click.exceptions.Exit(1) from e

    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(str(engine.url))}")
    cfg = config.build_alembic_config(
        db_url=engine.url.render_as_string(hide_password=False)
    )
    rev = _get_current_revision(engine)
    head = _get_head_revision(cfg)
    if rev == head:
        migration_status = MigrationStatus.UP_TO_DATE
    elif rev is None:
        migration_status = MigrationStatus.UNINITIALIZED
    else:
        migration_status = MigrationStatus.OUT_OF_DATE  # pragma: nocover

    message = f"{rev} ({migration_status.value})" if rev else migration_status.value
    click.echo(f"Schema  : {message}")

    if migration_status is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
