"""Evaluation reports.

A report can be built from a stored test (by id) or straight from the
inline payload an `EvaluationSession` produces, so a run can be reviewed
before it is saved.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from biaslens.domain.errors import (
    EmptyResultsError,
    InvalidRecordError,
    InvalidReportPayloadError,
)
from biaslens.domain.models import BiasTestTemplate, ResultStatus
from biaslens.domain.scoring import ScoreBand, compute_score, rate_score
from biaslens.interfaces.record_store import RecordStore

MET_STANDARDS = "Met Standards"
ISSUES_FOUND = "Potential Issues Found"


@dataclass(frozen=True, slots=True)
class ReportLine:
    """One protocol's row in the detailed findings."""

    template_id: int
    title: str
    status: ResultStatus
    notes: str = ""

    @property
    def passed(self) -> bool:
        return self.status is ResultStatus.PASS

    @property
    def verdict(self) -> str:
        return MET_STANDARDS if self.passed else ISSUES_FOUND


@dataclass(frozen=True, slots=True)
class Report:
    """Score, band and findings of one evaluation run."""

    app_name: str | None
    score: float | None
    band: ScoreBand
    lines: tuple[ReportLine, ...]
    test_id: int | None = None


def build_report(store: RecordStore, *, test_id: int, user_id: str) -> Report | None:
    """Build the report of a stored test, or None if the owner has no such test."""
    test = store.get_test_by_id(test_id, user_id)
    if test is None:
        return None

    templates = {template.id: template for template in store.get_test_templates()}
    lines = tuple(
        ReportLine(
            template_id=result.template_id,
            title=_title(templates, result.template_id),
            status=result.result,
            notes=result.notes,
        )
        for result in store.get_test_results(test_id, user_id)
    )
    return Report(
        app_name=test.name,
        score=test.score,
        band=rate_score(test.score),
        lines=lines,
        test_id=test.id,
    )


def report_from_payload(
    payload: str | Mapping[str, Any],
    templates: Iterable[BiasTestTemplate],
    *,
    app_name: str | None = None,
) -> Report:
    """Build a report from an inline ``{"protocols", "results", "notes"}`` payload.

    ``payload`` may be the JSON text or the decoded mapping. A payload with
    no results yields a report without a score.

    Raises:
        InvalidReportPayloadError: If the payload cannot be interpreted.
    """

    data = _decode(payload)
    raw_results = data.get("results", {})
    raw_notes = data.get("notes") or {}
    if not isinstance(raw_results, Mapping) or not isinstance(raw_notes, Mapping):
        raise InvalidReportPayloadError("results and notes must be objects")

    try:
        results = {
            int(key): ResultStatus.parse(value) for key, value in raw_results.items()
        }
        notes = {int(key): str(value) for key, value in raw_notes.items()}
    except (ValueError, InvalidRecordError) as e:
        raise InvalidReportPayloadError(str(e)) from e

    by_id = {template.id: template for template in templates}
    try:
        score: float | None = compute_score(results)
    except EmptyResultsError:
        score = None

    lines = tuple(
        ReportLine(
            template_id=template_id,
            title=_title(by_id, template_id),
            status=status,
            notes=notes.get(template_id, ""),
        )
        for template_id, status in results.items()
    )
    return Report(app_name=app_name, score=score, band=rate_score(score), lines=lines)


# --- Internal Helpers ---


def _decode(payload: str | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise InvalidReportPayloadError(f"not valid JSON ({e})") from e
    if not isinstance(payload, Mapping):
        raise InvalidReportPayloadError("payload must be a JSON object")
    return payload


def _title(templates: Mapping[int, BiasTestTemplate], template_id: int) -> str:
    template = templates.get(template_id)
    return template.title if template is not None else f"Protocol {template_id}"
