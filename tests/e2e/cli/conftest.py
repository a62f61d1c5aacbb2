"""Fixtures and helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, a CliRunner, an isolated filesystem, and an invoker bound to a
ready-made application container.
"""

import logging
from collections.abc import Callable

import click
import pytest
from click.testing import CliRunner, Result

from biaslens.entrypoints.cli.main import biaslens

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for console and flight-recorder tests."""
    logger = logging.getLogger("biaslens.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    biaslens.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(biaslens, "log-demo")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, app) -> Callable[..., Result]:
    """Invoke ``biaslens`` with the in-memory application container."""

    def _invoke(args: list[str], **kwargs) -> Result:
        return runner.invoke(biaslens, args, obj=app, **kwargs)

    return _invoke


@pytest.fixture
def signed_in(app):
    """Register and sign in ``ana`` on the application container."""
    return app.auth.register("ana", "s3cret").value
