"""Unit tests for `biaslens.adapters.db.sa_types.UTCDateTime`.

The type decorator is exercised directly against dialect objects; no engine
or table is involved.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

import pytest
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import dialect as PostgresDialect
from sqlalchemy.dialects.sqlite import dialect as SQLiteDialect

from biaslens.adapters.db.sa_types import UTCDateTime

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

DIALECTS = pytest.mark.parametrize(
    "dialect", [SQLiteDialect(), PostgresDialect()], ids=["sqlite", "postgres"]
)
NOON_UTC = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_python_type():
    assert UTCDateTime().python_type is datetime


@DIALECTS
def test_bind_none(dialect: Dialect):
    assert UTCDateTime().process_bind_param(None, dialect) is None


@DIALECTS
@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 1, 1, 12, 0, 0),
        datetime(2024, 1, 1, 5, 0, 0, tzinfo=timezone(timedelta(hours=-7))),
        NOON_UTC,
    ],
    ids=["naive", "minus7", "utc"],
)
def test_bind_normalizes_to_utc(dialect: Dialect, value: datetime):
    """SQLite binds naive UTC wall time; other dialects bind aware UTC."""
    out = UTCDateTime().process_bind_param(value, dialect)
    if dialect.name == "sqlite":
        assert out.tzinfo is None
        assert out == NOON_UTC.replace(tzinfo=None)
    else:
        assert out == NOON_UTC
        assert out.utcoffset() == timedelta(0)


@DIALECTS
def test_result_naive_is_read_as_utc(dialect: Dialect):
    out = UTCDateTime().process_result_value(datetime(2024, 1, 1, 12), dialect)
    assert out == NOON_UTC
    assert out.tzinfo is timezone.utc


def test_result_aware_is_converted_to_utc():
    aware = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    out = UTCDateTime().process_result_value(aware, PostgresDialect())
    assert out == NOON_UTC
    assert out.utcoffset() == timedelta(0)


def test_result_passthrough_for_non_datetimes():
    assert UTCDateTime().process_result_value("not-a-datetime", SQLiteDialect()) == (
        "not-a-datetime"
    )
    assert UTCDateTime().process_result_value(None, SQLiteDialect()) is None


def test_literal_compile_sqlite_uses_utc_wall_time():
    value = datetime(2024, 1, 1, 5, 0, 0, tzinfo=timezone(timedelta(hours=-7)))
    stmt = sa.select(sa.literal(value, type_=UTCDateTime()).label("dt"))
    sql = str(stmt.compile(dialect=SQLiteDialect(), compile_kwargs={"literal_binds": True}))
    assert re.search(r"2024-01-01 12:00:00(\.\d+)?", sql)
