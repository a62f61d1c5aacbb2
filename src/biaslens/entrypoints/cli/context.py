"""Access to the application container from CLI commands.

The container is built on first use and cached on the root context's
``obj``. Tests pass a ready-made container through ``CliRunner.invoke(obj=...)``
and it is used as-is.
"""

import click

from biaslens.bootstrap import AppContainer, bootstrap
from biaslens.interfaces.key_value_store import StorageError
from biaslens.service_layer.auth import STORAGE_FAULT


def get_app(ctx: click.Context) -> AppContainer:
    """Return the `AppContainer` for this invocation, bootstrapping it if needed."""
    root = ctx.find_root()
    if not isinstance(root.obj, AppContainer):
        try:
            root.obj = bootstrap()
        except StorageError as e:
            raise click.ClickException(f"{STORAGE_FAULT} {e}") from e
    return root.obj


def require_user(app: AppContainer) -> dict[str, str]:
    """Return the signed-in user or stop with a hint to log in."""
    user = app.auth.current_user
    if user is None:
        raise click.ClickException(
            "You are not logged in. Run 'biaslens account login' first."
        )
    return user
