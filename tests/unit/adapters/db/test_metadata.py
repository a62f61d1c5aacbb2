"""Tests for the naming convention of the shared `metadata`.

Constraint and index names are read from compiled DDL, so no database is
needed. A private `MetaData` with the same convention keeps the test tables
off the shared metadata.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.sqlite import dialect as SQLiteDialect
from sqlalchemy.schema import CreateIndex, CreateTable

from biaslens.adapters.db.metadata import metadata
from biaslens.adapters.key_value.schema import kv_items


def _ddl(element) -> str:
    return str(element.compile(dialect=SQLiteDialect()))


def _widgets() -> Table:
    return Table(
        "widgets",
        MetaData(naming_convention=metadata.naming_convention),
        Column("id", Integer, primary_key=True),
        Column("code", String(10)),
        Column("size", Integer),
        UniqueConstraint("code"),
        CheckConstraint("size > 0", name="positive_size"),
    )


def test_constraint_names_follow_convention():
    ddl = _ddl(CreateTable(_widgets()))
    assert "CONSTRAINT pk_widgets PRIMARY KEY" in ddl
    assert "CONSTRAINT uq_widgets_code UNIQUE" in ddl
    assert "CONSTRAINT ck_widgets_positive_size CHECK" in ddl


def test_unnamed_index_named_by_convention():
    table = _widgets()
    index = Index(None, table.c.size)
    assert "ix_widgets_widgets_size" in _ddl(CreateIndex(index))


def test_kv_items_primary_key_name():
    assert "CONSTRAINT pk_kv_items PRIMARY KEY" in _ddl(CreateTable(kv_items))
