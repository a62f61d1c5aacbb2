"""SQLAlchemy-backed KeyValueStore adapter.

Each operation runs in its own short transaction (``engine.begin()``), so
values are durable as soon as the call returns. Database errors are mapped to
`StorageUnavailableError`; a missing ``kv_items`` table surfaces the same way
until ``biaslens db upgrade`` has been run.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import DBAPIError

from biaslens.interfaces.key_value_store import (
    KeyValueStore,
    StorageUnavailableError,
    validate_key,
)

from .schema import kv_items

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class SqlAlchemyKeyValueStore(KeyValueStore):
    """KeyValueStore persisted in the ``kv_items`` table."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def get_item(self, key: str) -> str | None:
        validate_key(key)
        stmt = select(kv_items.c.value).where(kv_items.c.key == key)
        try:
            with self.engine.connect() as conn:
                return conn.execute(stmt).scalar_one_or_none()
        except DBAPIError as e:
            raise StorageUnavailableError(str(e)) from e

    def set_item(self, key: str, value: str) -> None:
        validate_key(key)
        now = datetime.datetime.now(datetime.timezone.utc)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(
                    update(kv_items)
                    .where(kv_items.c.key == key)
                    .values(value=value, updated_at=now)
                )
                if result.rowcount == 0:
                    conn.execute(
                        insert(kv_items).values(key=key, value=value, updated_at=now)
                    )
        except DBAPIError as e:
            raise StorageUnavailableError(str(e)) from e

    def remove_item(self, key: str) -> None:
        validate_key(key)
        try:
            with self.engine.begin() as conn:
                conn.execute(delete(kv_items).where(kv_items.c.key == key))
        except DBAPIError as e:
            raise StorageUnavailableError(str(e)) from e
