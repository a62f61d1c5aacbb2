"""Key-value store schema.

Defines the ``kv_items`` table used by `SqlAlchemyKeyValueStore`. One row per
key; values are opaque text (JSON for structured data).

The table is created by Alembic revision ``3c1f0b7a9d2e``.
"""

from __future__ import annotations

from sqlalchemy import Column, String, Table, Text, text

from biaslens.adapters.db.metadata import metadata
from biaslens.adapters.db.sa_types import UTCDateTime
from biaslens.interfaces.key_value_store import MAX_KEY_LENGTH

__all__ = ["kv_items"]

kv_items = Table(
    "kv_items",
    metadata,
    Column(
        "key",
        String(MAX_KEY_LENGTH),
        primary_key=True,
        comment="Storage key (e.g. 'user', 'users').",
    ),
    Column(
        "value",
        Text(),
        nullable=False,
        comment="Opaque text value; JSON-encoded for structured data.",
    ),
    Column(
        "updated_at",
        UTCDateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        comment="UTC timestamp of the last write.",
    ),
)
