"""Functional tests for the ``biaslens db`` subcommands.

A user who wants accounts kept in a database (instead of local files) points
``BIASLENS_DB_URL`` at SQLite, creates the schema, and then signs up.
"""

import re

import pytest
from click.testing import CliRunner

from biaslens.entrypoints.cli.db import (
    CANNOT_CONNECT_MSG,
    INVALID_URL_FORMAT_MSG,
    MISSING_DB_URL_MSG,
    UPGRADE_SCHEMA_INSTRUCTIONS,
    UPGRADE_SCHEMA_WARNING,
)
from biaslens.entrypoints.cli.main import biaslens

# pylint: disable=magic-value-comparison

BASE_REVISION = "3c1f0b7a9d2e"
REV_RE = re.compile(r"\b[0-9a-f]{12}\b")


@pytest.mark.parametrize(
    "cmd",
    [["db", "current"], ["db", "history", "-i"], ["db", "upgrade"], ["db", "status"]],
)
def test_db_no_url(cmd):
    """Commands that connect explain how to set BIASLENS_DB_URL."""
    result = CliRunner(env={"BIASLENS_DB_URL": ""}).invoke(biaslens, cmd)
    assert result.exit_code == 1
    assert MISSING_DB_URL_MSG in result.output


def test_heads_needs_no_database():
    result = CliRunner(env={"BIASLENS_DB_URL": ""}).invoke(biaslens, ["db", "heads"])
    assert result.exit_code == 0, result.output
    assert BASE_REVISION in result.output


def test_bad_urls(tmp_path):
    result = CliRunner(env={"BIASLENS_DB_URL": "not a valid url"}).invoke(
        biaslens, ["db", "upgrade"]
    )
    assert result.exit_code == 1
    assert INVALID_URL_FORMAT_MSG in result.output

    unreachable = f"sqlite:///{tmp_path / 'missing' / 'dir' / 'biaslens.db'}"
    result = CliRunner(env={"BIASLENS_DB_URL": unreachable}).invoke(
        biaslens, ["db", "status"]
    )
    assert result.exit_code == 1
    assert "Cannot connect to database" in result.output
    assert CANNOT_CONNECT_MSG in result.output


def test_new_user_sets_up_account_database(sqlite_url):
    runner = CliRunner(env={"BIASLENS_DB_URL": sqlite_url})

    # The user checks the database before doing anything
    result = runner.invoke(biaslens, ["db", "status"])
    assert result.exit_code == 0, result.output
    assert "Database reachable" in result.output
    assert "Backend : sqlite" in result.output
    assert "uninitialized" in result.output
    assert UPGRADE_SCHEMA_INSTRUCTIONS in result.output

    # Nothing has been applied yet
    result = runner.invoke(biaslens, ["db", "current"])
    assert result.exit_code == 0, result.output
    assert REV_RE.search(result.output) is None

    # They start an upgrade but back out at the prompt
    result = runner.invoke(biaslens, ["db", "upgrade"], input="n\n")
    assert result.exit_code == 1
    assert UPGRADE_SCHEMA_WARNING in result.output
    assert "Are you sure you want to proceed?" in result.output

    # They preview the SQL instead
    result = runner.invoke(biaslens, ["db", "upgrade", "--sql"])
    assert result.exit_code == 0, result.output
    assert "CREATE TABLE kv_items" in result.output
    assert REV_RE.search(runner.invoke(biaslens, ["db", "current"]).output) is None

    # Then they go ahead
    result = runner.invoke(biaslens, ["db", "upgrade"], input="y\n")
    assert result.exit_code == 0, result.output
    assert "Upgrade complete!" in result.output

    result = runner.invoke(biaslens, ["db", "status"])
    assert "up to date" in result.output
    assert UPGRADE_SCHEMA_INSTRUCTIONS not in result.output

    result = runner.invoke(biaslens, ["db", "history", "-i"])
    assert "(current)" in result.output

    # Accounts now live in the database and survive between runs
    result = runner.invoke(biaslens, ["account", "register", "-u", "ana", "--password", "pw"])
    assert result.exit_code == 0, result.output
    result = runner.invoke(biaslens, ["account", "whoami"])
    assert result.exit_code == 0
    assert "ana" in result.output


def test_accounts_fail_cleanly_before_upgrade(sqlite_url):
    runner = CliRunner(env={"BIASLENS_DB_URL": sqlite_url})
    result = runner.invoke(biaslens, ["account", "register", "-u", "ana", "--password", "pw"])
    assert result.exit_code == 1
    assert "Account storage is unavailable." in result.output
