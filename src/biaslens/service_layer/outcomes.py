"""Explicit success/failure results returned across the service boundary.

Service-layer entry points (the message bus and the auth store) never raise
to their callers. They return either `Success` carrying a value or `Failure`
carrying a `FailureKind` and a user-facing message. `Failure` is falsy, so
``if not outcome:`` reads like the boolean it replaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeAlias, TypeVar

from biaslens.domain.errors import (
    EmptyResultsError,
    InvalidRecordError,
    InvalidReportPayloadError,
    NoActiveProtocolError,
    RecordNotFoundError,
)

T = TypeVar("T")


class FailureKind(Enum):
    """Why an operation failed."""

    NOT_FOUND = "not found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DENIED = "denied"
    FAULT = "fault"


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """The operation completed; ``value`` is its result."""

    value: T

    @property
    def ok(self) -> bool:
        """Always True."""
        return True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The operation did not complete and changed nothing."""

    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        """Always False."""
        return False

    def __bool__(self) -> bool:
        return False


Outcome: TypeAlias = Success[T] | Failure

VALIDATION_ERRORS = (
    InvalidRecordError,
    NoActiveProtocolError,
    InvalidReportPayloadError,
    EmptyResultsError,
)


def failure_from_exception(exc: Exception) -> Failure:
    """Classify an exception raised below the service boundary."""
    if isinstance(exc, RecordNotFoundError):
        return Failure(FailureKind.NOT_FOUND, str(exc))
    if isinstance(exc, VALIDATION_ERRORS):
        return Failure(FailureKind.VALIDATION, str(exc))
    return Failure(FailureKind.FAULT, "An unexpected error occurred.")
