"""Interface for the record store.

The record store keeps evaluation runs (tests), their per-protocol results,
and community reviews, and exposes the read-only template catalog. Records
are owned by a user id; every owner-scoped operation matches on it exactly.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any

from biaslens.domain.models import (
    BiasTest,
    BiasTestResult,
    BiasTestTemplate,
    ResultStatus,
    Review,
)

DEFAULT_RECENT_LIMIT = 5


class RecordStore(abc.ABC):
    """Contract for create/read/filter/delete access to evaluation records."""

    # --- Tests ---

    @abc.abstractmethod
    def add_test(
        self,
        name: str,
        score: float,
        test_type: str,
        user_id: str,
        details: Mapping[str, Any] | None = None,
    ) -> int:
        """Append a new test stamped with the current time.

        Args:
            name: Name of the evaluated app.
            score: Score of the run, 0-10.
            test_type: Free-form kind of run (e.g. "Bias Evaluation").
            user_id: Owner of the test.
            details: Free-form details blob.

        Returns:
            The id of the new test.

        Raises:
            InvalidRecordError: If the test would violate a domain invariant.
                No id is consumed in that case.
        """

    @abc.abstractmethod
    def get_recent_tests(
        self, user_id: str, limit: int = DEFAULT_RECENT_LIMIT
    ) -> list[BiasTest]:
        """Return the owner's most recent tests, newest first.

        Tests with equal dates keep their insertion order. A non-positive
        ``limit`` returns an empty list.
        """

    @abc.abstractmethod
    def get_test_by_id(self, test_id: int, user_id: str) -> BiasTest | None:
        """Return the test matching both id and owner, or None if there is none."""

    @abc.abstractmethod
    def get_all_tests(self, user_id: str | None = None) -> list[BiasTest]:
        """Return all tests in insertion order, optionally only the owner's."""

    @abc.abstractmethod
    def delete_test(self, test_id: int, user_id: str) -> bool:
        """Delete the owner's test and every result of it with the same owner.

        Returns:
            True if a test was removed; False (a silent no-op) otherwise.
        """

    @abc.abstractmethod
    def clear_all_tests(self) -> None:
        """Remove every test and result and restart both id sequences at 1."""

    # --- Test results ---

    @abc.abstractmethod
    def add_test_result(
        self,
        test_id: int,
        template_id: int,
        result: ResultStatus | str,
        user_id: str,
        notes: str = "",
    ) -> int:
        """Append the outcome of one protocol of a test.

        Returns:
            The id of the new result.

        Raises:
            InvalidRecordError: If ``result`` is not a known status.
            TemplateNotFoundError: If ``template_id`` is not in the catalog.
            TestNotFoundError: If the owner has no test ``test_id``.
        """

    @abc.abstractmethod
    def get_test_results(self, test_id: int, user_id: str) -> list[BiasTestResult]:
        """Return the owner's results for a test, oldest first."""

    @abc.abstractmethod
    def get_all_test_results(
        self, user_id: str | None = None
    ) -> list[BiasTestResult]:
        """Return all results in insertion order, optionally only the owner's."""

    # --- Templates ---

    @abc.abstractmethod
    def get_test_templates(self) -> list[BiasTestTemplate]:
        """Return the template catalog in id order."""

    @abc.abstractmethod
    def get_template_by_id(self, template_id: int) -> BiasTestTemplate | None:
        """Return a template by id, or None if it is not in the catalog."""

    # --- Reviews ---

    @abc.abstractmethod
    def add_review(
        self,
        app_name: str,
        rating: int,
        comment: str,
        user_id: str,
        author: str = "Anonymous",
    ) -> int:
        """Append a review stamped with the current time.

        Returns:
            The id of the new review.

        Raises:
            InvalidRecordError: If the review would violate a domain invariant.
        """

    @abc.abstractmethod
    def get_reviews(
        self, app_name: str | None = None, user_id: str | None = None
    ) -> list[Review]:
        """Return reviews, newest first.

        Args:
            app_name: If given, keep reviews whose app name contains it
                (case-insensitive).
            user_id: If given, keep only reviews owned by this user.
        """

    @abc.abstractmethod
    def get_average_rating(
        self, app_name: str, user_id: str | None = None
    ) -> float | None:
        """Return the mean rating of reviews for exactly ``app_name``.

        Returns:
            The arithmetic mean, or None if no review matches.
        """

    @abc.abstractmethod
    def delete_review(self, review_id: int, user_id: str) -> bool:
        """Delete the owner's review.

        Returns:
            True if a review was removed; False (a silent no-op) otherwise.
        """

    @abc.abstractmethod
    def clear_all_reviews(self) -> None:
        """Remove every review and restart the review id sequence at 1."""
