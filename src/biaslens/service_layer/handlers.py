"""Service layer handlers."""

import logging
from collections.abc import Callable

from biaslens.domain.errors import InvalidRecordError
from biaslens.domain.models import ResultStatus
from biaslens.domain.scoring import compute_score
from biaslens.interfaces.record_store import RecordStore

from . import commands

logger = logging.getLogger(__name__)

# ============================================================================
#                           Test Handlers
# ============================================================================


def add_test(cmd: commands.AddTest, store: RecordStore) -> int:
    """Store a finished test and return its id."""
    return store.add_test(
        name=cmd.name.strip(),
        score=cmd.score,
        test_type=cmd.test_type,
        user_id=cmd.user_id,
        details=cmd.details,
    )


def add_test_result(cmd: commands.AddTestResult, store: RecordStore) -> int:
    """Append one protocol outcome to an existing test and return its id."""
    return store.add_test_result(
        test_id=cmd.test_id,
        template_id=cmd.template_id,
        result=cmd.result,
        user_id=cmd.user_id,
        notes=cmd.notes,
    )


def record_evaluation(cmd: commands.RecordEvaluation, store: RecordStore) -> int:
    """Score a finished run and store it with one result per protocol.

    The test's ``details`` carry the catalog protocols, the recorded statuses
    and any notes, so a report can be rebuilt from the test alone.
    """

    if not cmd.results:
        raise InvalidRecordError("test", "an evaluation needs at least one result")

    results = {
        template_id: ResultStatus.parse(status)
        for template_id, status in cmd.results.items()
    }
    for template_id in results:
        if store.get_template_by_id(template_id) is None:
            raise InvalidRecordError(
                "test", f"protocol {template_id} is not in the catalog"
            )

    score = compute_score(results)
    details = {
        "protocols": [template.id for template in store.get_test_templates()],
        "results": {str(tid): status.value for tid, status in results.items()},
        "notes": {str(tid): note for tid, note in cmd.notes.items() if note},
    }

    test_id = store.add_test(
        name=cmd.name.strip(),
        score=score,
        test_type=cmd.test_type,
        user_id=cmd.user_id,
        details=details,
    )
    for template_id, status in results.items():
        store.add_test_result(
            test_id=test_id,
            template_id=template_id,
            result=status,
            user_id=cmd.user_id,
            notes=cmd.notes.get(template_id, ""),
        )

    logger.info(
        "Recorded evaluation %s of %s: %d protocols, score %.1f",
        test_id,
        cmd.name,
        len(results),
        score,
    )
    return test_id


def delete_test(cmd: commands.DeleteTest, store: RecordStore) -> bool:
    """Delete a test with its results; False when the owner has no such test."""
    return store.delete_test(cmd.test_id, cmd.user_id)


def clear_all_tests(_: commands.ClearAllTests, store: RecordStore) -> None:
    """Wipe every test and result."""
    store.clear_all_tests()


# ============================================================================
#                           Review Handlers
# ============================================================================


def add_review(cmd: commands.AddReview, store: RecordStore) -> int:
    """Post a community review and return its id."""
    return store.add_review(
        app_name=cmd.app_name.strip(),
        rating=cmd.rating,
        comment=cmd.comment.strip(),
        user_id=cmd.user_id,
        author=cmd.author.strip(),
    )


def delete_review(cmd: commands.DeleteReview, store: RecordStore) -> bool:
    """Delete one of the user's reviews; False when there is no such review."""
    return store.delete_review(cmd.review_id, cmd.user_id)


def clear_all_reviews(_: commands.ClearAllReviews, store: RecordStore) -> None:
    """Wipe every review."""
    store.clear_all_reviews()


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., object]] = {
    commands.AddTest: add_test,
    commands.AddTestResult: add_test_result,
    commands.RecordEvaluation: record_evaluation,
    commands.DeleteTest: delete_test,
    commands.ClearAllTests: clear_all_tests,
    commands.AddReview: add_review,
    commands.DeleteReview: delete_review,
    commands.ClearAllReviews: clear_all_reviews,
}
