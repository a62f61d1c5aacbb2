"""BIASLENS account CLI — local sign-up, sign-in and sign-out.

Accounts are kept in the local key-value storage (or the database given by
``BIASLENS_DB_URL``). Passwords are prompted with hidden input and never
echoed or logged.
"""

import click
import click_extra as clickx

from biaslens.service_layer.outcomes import Failure

from .context import get_app
from .helpers import error, success, warn


def _fail(outcome: Failure) -> None:
    error(outcome.message)
    raise click.exceptions.Exit(1)


@click.group(cls=clickx.ExtraGroup)
def account() -> None:
    """Manage your local BIASLENS account."""


@account.command()
@click.option("--username", "-u", prompt=True, help="Name to register.")
@click.password_option(help="Password (prompted twice when omitted).")
@click.pass_context
def register(ctx: click.Context, username: str, password: str) -> None:
    """Create an account and log in with it."""
    outcome = get_app(ctx).auth.register(username, password)
    if not outcome:
        _fail(outcome)
    success(f"Welcome, {outcome.value['username']}! You are now logged in.")


@account.command()
@click.option("--username", "-u", prompt=True, help="Your username.")
@click.option(
    "--password", prompt=True, hide_input=True, help="Your password (prompted)."
)
@click.pass_context
def login(ctx: click.Context, username: str, password: str) -> None:
    """Log in with an existing account."""
    outcome = get_app(ctx).auth.login(username, password)
    if not outcome:
        _fail(outcome)
    success(f"Logged in as {outcome.value['username']}.")


@account.command()
@click.pass_context
def logout(ctx: click.Context) -> None:
    """Log out of the current account."""
    app = get_app(ctx)
    if app.auth.current_user is None:
        warn("You are not logged in.")
        return
    outcome = app.auth.logout()
    if not outcome:
        _fail(outcome)
    success("Logged out.")


@account.command()
@click.pass_context
def whoami(ctx: click.Context) -> None:
    """Show who is logged in."""
    user = get_app(ctx).auth.current_user
    if user is None:
        warn("You are not logged in.")
        raise click.exceptions.Exit(1)
    click.echo(user["username"])
