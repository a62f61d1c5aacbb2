"""BIASLENS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every implementation of an interface.
- integration/  : Real interactions with SQLite databases, Alembic and the filesystem.
- e2e/          : The command-line interface driven through Click's CliRunner.
- fixtures/     : Shared pytest fixtures (no tests here).

Markers are applied per folder by each folder's ``conftest.py``.
"""
