"""Create kv_items table

Revision ID: 3c1f0b7a9d2e
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from biaslens.adapters.db.sa_types import UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3c1f0b7a9d2e"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "kv_items",
        sa.Column(
            "key",
            sa.String(length=200),
            nullable=False,
            comment="Storage key (e.g. 'user', 'users').",
        ),
        sa.Column(
            "value",
            sa.Text(),
            nullable=False,
            comment="Opaque text value; JSON-encoded for structured data.",
        ),
        sa.Column(
            "updated_at",
            UTCDateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="UTC timestamp of the last write.",
        ),
        sa.PrimaryKeyConstraint("key", name=op.f("pk_kv_items")),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("kv_items")
