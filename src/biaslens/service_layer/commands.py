"""Module defining Commands."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from biaslens.domain.models import DEFAULT_AUTHOR, ResultStatus

DEFAULT_TEST_TYPE = "Bias Evaluation"


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- Tests ---


@dataclass(frozen=True)
class AddTest(Command):
    """Command to store a finished test with a precomputed score."""

    name: str
    score: float
    test_type: str
    user_id: str
    details: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AddTestResult(Command):
    """Command to append the outcome of one protocol to an existing test."""

    test_id: int
    template_id: int
    result: ResultStatus | str
    user_id: str
    notes: str = ""


@dataclass(frozen=True)
class RecordEvaluation(Command):
    """Command to score a finished run and store it with one result per protocol."""

    name: str
    user_id: str
    results: Mapping[int, ResultStatus]
    notes: Mapping[int, str] = field(default_factory=dict)
    test_type: str = DEFAULT_TEST_TYPE


@dataclass(frozen=True)
class DeleteTest(Command):
    """Command to delete a test and its results."""

    test_id: int
    user_id: str


@dataclass(frozen=True)
class ClearAllTests(Command):
    """Command to wipe every test and result."""


# --- Reviews ---


@dataclass(frozen=True)
class AddReview(Command):
    """Command to post a community review."""

    app_name: str
    rating: int
    comment: str
    user_id: str
    author: str = DEFAULT_AUTHOR


@dataclass(frozen=True)
class DeleteReview(Command):
    """Command to delete one of the user's reviews."""

    review_id: int
    user_id: str


@dataclass(frozen=True)
class ClearAllReviews(Command):
    """Command to wipe every review."""
