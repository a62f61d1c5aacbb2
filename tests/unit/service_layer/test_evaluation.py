"""Unit tests for `EvaluationSession`."""

import pytest

from biaslens.domain.catalog import DEFAULT_TEMPLATES
from biaslens.domain.errors import (
    InvalidRecordError,
    NoActiveProtocolError,
    TemplateNotFoundError,
)
from biaslens.domain.models import ResultStatus
from biaslens.service_layer.commands import DEFAULT_TEST_TYPE, RecordEvaluation
from biaslens.service_layer.evaluation import EvaluationSession

# pylint: disable=redefined-outer-name
# pylint: disable=magic-value-comparison


@pytest.fixture
def session() -> EvaluationSession:
    return EvaluationSession("  Study Buddy ", DEFAULT_TEMPLATES)


def _run(session, template_id, status, notes=""):
    session.start(template_id)
    session.record(status, notes)


def test_app_name_is_stripped(session):
    assert session.app_name == "Study Buddy"


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_app_name_rejected(name):
    with pytest.raises(InvalidRecordError):
        EvaluationSession(name, DEFAULT_TEMPLATES)


def test_new_session_is_empty(session):
    assert session.active is None
    assert not session.has_results
    assert session.score() == 0.0
    assert [t.id for t in session.templates] == [1, 2, 3]


def test_start_sets_active_protocol(session):
    template = session.start(2)
    assert template.title == "Cultural Bias"
    assert session.active is template


def test_start_unknown_protocol(session):
    with pytest.raises(TemplateNotFoundError):
        session.start(99)
    assert session.active is None


def test_record_without_active_protocol(session):
    with pytest.raises(NoActiveProtocolError):
        session.record(ResultStatus.PASS)


def test_record_closes_protocol(session):
    _run(session, 1, "pass", "  looked fine ")
    assert session.active is None
    assert session.results == {1: ResultStatus.PASS}
    assert session.notes == {1: "looked fine"}


def test_rerecording_replaces_status_and_notes(session):
    _run(session, 1, "PASS", "first")
    _run(session, 1, "FAIL")
    assert session.results == {1: ResultStatus.FAIL}
    assert session.notes == {}


def test_record_rejects_unknown_status(session):
    session.start(1)
    with pytest.raises(InvalidRecordError):
        session.record("MAYBE")
    assert not session.has_results


def test_cancel_discards_active_protocol(session):
    session.start(3)
    session.cancel()
    assert session.active is None
    assert not session.has_results


def test_score(session):
    _run(session, 1, "PASS")
    _run(session, 2, "PASS")
    _run(session, 3, "FAIL")
    assert session.score() == pytest.approx(6.67, abs=0.01)


@pytest.mark.parametrize("status", ["WARNING", ResultStatus.WARNING])
def test_record_accepts_only_pass_or_fail(session, status):
    _run(session, 1, "pass")
    session.start(2)
    with pytest.raises(InvalidRecordError, match="PASS or FAIL"):
        session.record(status)
    assert session.results == {1: ResultStatus.PASS}


def test_results_are_copies(session):
    _run(session, 1, "PASS")
    session.results[2] = ResultStatus.PASS
    assert 2 not in session.results


def test_payload_lists_all_protocols(session):
    _run(session, 2, "FAIL", "stereotyped examples")
    assert session.to_payload() == {
        "protocols": [1, 2, 3],
        "results": {"2": "FAIL"},
        "notes": {"2": "stereotyped examples"},
    }


def test_to_command(session):
    _run(session, 1, "PASS")
    _run(session, 3, "FAIL", "tracks location")

    cmd = session.to_command("user-1")

    assert cmd == RecordEvaluation(
        name="Study Buddy",
        user_id="user-1",
        results={1: ResultStatus.PASS, 3: ResultStatus.FAIL},
        notes={3: "tracks location"},
    )
    assert cmd.test_type == DEFAULT_TEST_TYPE
