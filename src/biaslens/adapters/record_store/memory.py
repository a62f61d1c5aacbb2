"""In-memory RecordStore implementation."""

from __future__ import annotations

import datetime
import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from biaslens.domain.errors import TemplateNotFoundError, TestNotFoundError
from biaslens.domain.models import (
    DEFAULT_AUTHOR,
    BiasTest,
    BiasTestResult,
    BiasTestTemplate,
    ResultStatus,
    Review,
)
from biaslens.interfaces.record_store import DEFAULT_RECENT_LIMIT, RecordStore

from .memory_store import InMemoryRecordData

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]


def utc_now() -> datetime.datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


class InMemoryRecordStore(RecordStore):
    """RecordStore backed by plain lists with linear scans.

    Every operation runs under one re-entrant lock, so the id sequences and
    collections never interleave. Records are validated before an id is
    drawn, so a rejected record leaves no gap in the sequence.
    """

    def __init__(self, data: InMemoryRecordData, clock: Clock = utc_now) -> None:
        self._data = data
        self._clock = clock
        self._lock = threading.RLock()

    # --- Tests ---

    def add_test(
        self,
        name: str,
        score: float,
        test_type: str,
        user_id: str,
        details: Mapping[str, Any] | None = None,
    ) -> int:
        with self._lock:
            test = BiasTest(
                id=self._data.test_ids.peek(),
                name=name,
                date=self._clock(),
                score=score,
                test_type=test_type,
                user_id=user_id,
                details=details or {},
            )
            self._data.test_ids.new_id()
            self._data.tests.append(test)
        logger.info("Added test %s: %s", test.id, name)
        return test.id

    def get_recent_tests(
        self, user_id: str, limit: int = DEFAULT_RECENT_LIMIT
    ) -> list[BiasTest]:
        if limit <= 0:
            return []
        with self._lock:
            owned = [test for test in self._data.tests if test.user_id == user_id]
        # sorted() is stable, so equal dates keep insertion order
        return sorted(owned, key=lambda test: test.date, reverse=True)[:limit]

    def get_test_by_id(self, test_id: int, user_id: str) -> BiasTest | None:
        with self._lock:
            for test in self._data.tests:
                if test.id == test_id and test.user_id == user_id:
                    return test
        return None

    def get_all_tests(self, user_id: str | None = None) -> list[BiasTest]:
        with self._lock:
            return [
                test
                for test in self._data.tests
                if user_id is None or test.user_id == user_id
            ]

    def delete_test(self, test_id: int, user_id: str) -> bool:
        with self._lock:
            before = len(self._data.tests)
            self._data.tests[:] = [
                test
                for test in self._data.tests
                if not (test.id == test_id and test.user_id == user_id)
            ]
            removed = len(self._data.tests) != before
            self._data.test_results[:] = [
                result
                for result in self._data.test_results
                if not (result.test_id == test_id and result.user_id == user_id)
            ]
        if removed:
            logger.info("Deleted test %s and associated results", test_id)
        else:
            logger.debug("Delete test %s for %s: no such test; noop", test_id, user_id)
        return removed

    def clear_all_tests(self) -> None:
        with self._lock:
            self._data.tests.clear()
            self._data.test_results.clear()
            self._data.test_ids.reset()
            self._data.result_ids.reset()
        logger.info("Cleared all tests and results")

    # --- Test results ---

    def add_test_result(
        self,
        test_id: int,
        template_id: int,
        result: ResultStatus | str,
        user_id: str,
        notes: str = "",
    ) -> int:
        with self._lock:
            if self.get_template_by_id(template_id) is None:
                raise TemplateNotFoundError(template_id)
            if self.get_test_by_id(test_id, user_id) is None:
                raise TestNotFoundError(test_id, user_id)
            record = BiasTestResult(
                id=self._data.result_ids.peek(),
                test_id=test_id,
                template_id=template_id,
                result=ResultStatus.parse(result),
                notes=notes,
                user_id=user_id,
                timestamp=self._clock(),
            )
            self._data.result_ids.new_id()
            self._data.test_results.append(record)
        logger.debug("Added test result %s for test %s", record.id, test_id)
        return record.id

    def get_test_results(self, test_id: int, user_id: str) -> list[BiasTestResult]:
        with self._lock:
            matching = [
                result
                for result in self._data.test_results
                if result.test_id == test_id and result.user_id == user_id
            ]
        return sorted(matching, key=lambda result: result.timestamp)

    def get_all_test_results(
        self, user_id: str | None = None
    ) -> list[BiasTestResult]:
        with self._lock:
            return [
                result
                for result in self._data.test_results
                if user_id is None or result.user_id == user_id
            ]

    # --- Templates ---

    def get_test_templates(self) -> list[BiasTestTemplate]:
        return sorted(self._data.templates, key=lambda template: template.id)

    def get_template_by_id(self, template_id: int) -> BiasTestTemplate | None:
        for template in self._data.templates:
            if template.id == template_id:
                return template
        return None

    # --- Reviews ---

    def add_review(
        self,
        app_name: str,
        rating: int,
        comment: str,
        user_id: str,
        author: str = DEFAULT_AUTHOR,
    ) -> int:
        with self._lock:
            review = Review(
                id=self._data.review_ids.peek(),
                app_name=app_name,
                rating=rating,
                comment=comment,
                author=author or DEFAULT_AUTHOR,
                user_id=user_id,
                timestamp=self._clock(),
            )
            self._data.review_ids.new_id()
            self._data.reviews.append(review)
        logger.info("Added review %s for app %s", review.id, app_name)
        return review.id

    def get_reviews(
        self, app_name: str | None = None, user_id: str | None = None
    ) -> list[Review]:
        needle = app_name.lower() if app_name else None
        with self._lock:
            matching = [
                review
                for review in self._data.reviews
                if (needle is None or needle in review.app_name.lower())
                and (user_id is None or review.user_id == user_id)
            ]
        return sorted(matching, key=lambda review: review.timestamp, reverse=True)

    def get_average_rating(
        self, app_name: str, user_id: str | None = None
    ) -> float | None:
        with self._lock:
            ratings = [
                review.rating
                for review in self._data.reviews
                if review.app_name == app_name
                and (user_id is None or review.user_id == user_id)
            ]
        if not ratings:
            return None
        return sum(ratings) / len(ratings)

    def delete_review(self, review_id: int, user_id: str) -> bool:
        with self._lock:
            for index, review in enumerate(self._data.reviews):
                if review.id == review_id and review.user_id == user_id:
                    del self._data.reviews[index]
                    logger.info("Deleted review %s", review_id)
                    return True
        logger.debug(
            "Delete review %s for %s: no such review; noop", review_id, user_id
        )
        return False

    def clear_all_reviews(self) -> None:
        with self._lock:
            self._data.reviews.clear()
            self._data.review_ids.reset()
        logger.info("Cleared all reviews")
