"""Unit tests for the Success/Failure outcome types."""

import pytest

from biaslens.domain.errors import (
    EmptyResultsError,
    InvalidRecordError,
    InvalidReportPayloadError,
    NoActiveProtocolError,
    TemplateNotFoundError,
    TestNotFoundError,
)
from biaslens.service_layer.outcomes import (
    Failure,
    FailureKind,
    Success,
    failure_from_exception,
)


def test_success_is_truthy_and_carries_value():
    outcome = Success(3)
    assert outcome
    assert outcome.ok
    assert outcome.value == 3


def test_success_of_falsy_value_is_still_truthy():
    assert Success(None)
    assert Success(False)


def test_failure_is_falsy():
    outcome = Failure(FailureKind.DENIED, "nope")
    assert not outcome
    assert not outcome.ok
    assert outcome.message == "nope"


@pytest.mark.parametrize(
    ("exc", "kind"),
    [
        (TestNotFoundError(1, "u"), FailureKind.NOT_FOUND),
        (TemplateNotFoundError(9), FailureKind.NOT_FOUND),
        (InvalidRecordError("review", "bad"), FailureKind.VALIDATION),
        (NoActiveProtocolError(), FailureKind.VALIDATION),
        (InvalidReportPayloadError("bad"), FailureKind.VALIDATION),
        (EmptyResultsError(), FailureKind.VALIDATION),
        (RuntimeError("boom"), FailureKind.FAULT),
    ],
)
def test_failure_from_exception_kinds(exc, kind):
    assert failure_from_exception(exc).kind is kind


def test_faults_do_not_leak_exception_text():
    failure = failure_from_exception(RuntimeError("secret internals"))
    assert "secret" not in failure.message


def test_expected_failures_keep_exception_text():
    failure = failure_from_exception(InvalidRecordError("review", "bad rating"))
    assert failure.message == "Invalid review: bad rating"
