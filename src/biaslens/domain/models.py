"""Record types for evaluation runs, results, templates, reviews and users.

All records are immutable. Validation happens in ``__post_init__`` so an
invalid record can never be built, and therefore never reaches a store.

Conventions:
  - ``date`` and ``timestamp`` fields are timezone-aware UTC datetimes.
  - ``user_id`` is the id of the owning `User`.
  - ids of tests, results and reviews are positive integers assigned by the store.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from types import MappingProxyType
from typing import Any

from .errors import InvalidRecordError

# pylint: disable=too-many-instance-attributes

MIN_SCORE = 0.0
MAX_SCORE = 10.0
MIN_RATING = 1
MAX_RATING = 5
DEFAULT_AUTHOR = "Anonymous"


class ResultStatus(str, Enum):
    """Outcome of a single protocol within an evaluation run.

    ``WARNING`` is accepted and stored, but nothing produces it yet; scoring
    counts it as a non-passing result.
    """

    PASS = "PASS"
    FAIL = "FAIL"
    WARNING = "WARNING"

    @classmethod
    def parse(cls, value: ResultStatus | str) -> ResultStatus:
        """Normalize a status or its (case-insensitive) name into a `ResultStatus`.

        Raises:
            InvalidRecordError: If the value is not a known status.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            raise InvalidRecordError(
                "test result", f"unknown result status {value!r}"
            ) from e


def _require_text(kind: str, name: str, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(kind, f"{name} must be a non-empty string")


def _require_utc(kind: str, name: str, value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() != timedelta(0):
        raise InvalidRecordError(kind, f"{name} must be timezone-aware UTC")


@dataclass(frozen=True, slots=True)
class User:
    """A registered account. ``password_hash`` is never a plaintext password."""

    id: str
    username: str
    password_hash: str

    def __post_init__(self) -> None:
        _require_text("user", "username", self.username)

    def to_current_user_blob(self) -> dict[str, str]:
        """Return the public part of the user, as persisted under the ``user`` key."""
        return {"id": self.id, "username": self.username}


@dataclass(frozen=True, slots=True)
class BiasTest:
    """A finished evaluation run of one AI product."""

    id: int
    name: str  # name of the evaluated app
    date: datetime
    score: float
    test_type: str
    user_id: str
    details: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _require_text("test", "name", self.name)
        _require_utc("test", "date", self.date)
        if (
            isinstance(self.score, bool)
            or not isinstance(self.score, numbers.Real)
            or not MIN_SCORE <= self.score <= MAX_SCORE
        ):
            raise InvalidRecordError(
                "test", f"score must be between {MIN_SCORE:g} and {MAX_SCORE:g}"
            )
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))


@dataclass(frozen=True, slots=True)
class BiasTestResult:
    """The recorded outcome of one protocol within an evaluation run."""

    id: int
    test_id: int
    template_id: int
    result: ResultStatus
    notes: str
    user_id: str
    timestamp: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "result", ResultStatus.parse(self.result))
        _require_utc("test result", "timestamp", self.timestamp)


@dataclass(frozen=True, slots=True)
class BiasTestTemplate:
    """A scripted protocol: ordered steps to follow and the metrics they inform."""

    id: int
    title: str
    description: str
    icon: str
    color: str
    steps: tuple[str, ...]
    metrics: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Review:
    """A community review of a named app."""

    id: int
    app_name: str
    rating: int
    comment: str
    author: str
    user_id: str
    timestamp: datetime

    def __post_init__(self) -> None:
        _require_text("review", "app_name", self.app_name)
        _require_text("review", "comment", self.comment)
        if (
            isinstance(self.rating, bool)
            or not isinstance(self.rating, int)
            or not MIN_RATING <= self.rating <= MAX_RATING
        ):
            raise InvalidRecordError(
                "review",
                f"rating must be an integer between {MIN_RATING} and {MAX_RATING}",
            )
        _require_utc("review", "timestamp", self.timestamp)


@dataclass(frozen=True, slots=True)
class Resource:
    """A reference document or tool about AI fairness in education."""

    title: str
    description: str
    url: str
    icon: str
    category: str
