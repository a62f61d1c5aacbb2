"""In-progress evaluation runs.

An `EvaluationSession` walks an evaluator through the protocols of the
catalog for one app. Each protocol is started, followed step by step, and
marked PASS or FAIL with optional notes. Nothing is stored until the
session is turned into a `RecordEvaluation` command.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from biaslens.domain.errors import (
    EmptyResultsError,
    InvalidRecordError,
    NoActiveProtocolError,
    TemplateNotFoundError,
)
from biaslens.domain.models import BiasTestTemplate, ResultStatus
from biaslens.domain.scoring import compute_score

from .commands import RecordEvaluation

logger = logging.getLogger(__name__)

# WARNING can be stored but is never given by an evaluator
RECORDABLE_STATUSES = (ResultStatus.PASS, ResultStatus.FAIL)


class EvaluationSession:
    """Results gathered so far while evaluating one app.

    Results and notes are keyed by template id and kept in the order the
    protocols were first completed. Recording a protocol again replaces its
    earlier status.
    """

    def __init__(self, app_name: str, templates: Iterable[BiasTestTemplate]) -> None:
        if not app_name or not app_name.strip():
            raise InvalidRecordError("test", "app name must be a non-empty string")
        self.app_name = app_name.strip()
        self._templates = {template.id: template for template in templates}
        self._active: BiasTestTemplate | None = None
        self._results: dict[int, ResultStatus] = {}
        self._notes: dict[int, str] = {}

    @property
    def templates(self) -> list[BiasTestTemplate]:
        return list(self._templates.values())

    @property
    def active(self) -> BiasTestTemplate | None:
        """The protocol being run, if any."""
        return self._active

    @property
    def results(self) -> dict[int, ResultStatus]:
        return dict(self._results)

    @property
    def notes(self) -> dict[int, str]:
        return dict(self._notes)

    @property
    def has_results(self) -> bool:
        return bool(self._results)

    def start(self, template_id: int) -> BiasTestTemplate:
        """Make ``template_id`` the active protocol and return it."""
        template = self._templates.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        self._active = template
        logger.debug("Started protocol %s for %s", template.title, self.app_name)
        return template

    def record(self, status: ResultStatus | str, notes: str = "") -> None:
        """Store the outcome of the active protocol and close it.

        Raises:
            NoActiveProtocolError: If no protocol has been started.
            InvalidRecordError: If ``status`` is not PASS or FAIL.
        """
        if self._active is None:
            raise NoActiveProtocolError
        parsed = ResultStatus.parse(status)
        if parsed not in RECORDABLE_STATUSES:
            raise InvalidRecordError(
                "test result", f"a protocol is marked PASS or FAIL, not {parsed.value}"
            )
        template_id = self._active.id
        self._results[template_id] = parsed
        if notes.strip():
            self._notes[template_id] = notes.strip()
        else:
            self._notes.pop(template_id, None)
        self._active = None

    def cancel(self) -> None:
        """Leave the active protocol without recording anything."""
        self._active = None

    def score(self) -> float:
        """Current score, 0.0 while nothing has been recorded."""
        try:
            return compute_score(self._results)
        except EmptyResultsError:
            return 0.0

    def to_payload(self) -> dict[str, Any]:
        """Inline report payload: the protocols offered and the recorded statuses."""
        return {
            "protocols": list(self._templates),
            "results": {str(tid): status.value for tid, status in self._results.items()},
            "notes": {str(tid): note for tid, note in self._notes.items()},
        }

    def to_command(self, user_id: str) -> RecordEvaluation:
        """Build the command that stores this run for ``user_id``."""
        return RecordEvaluation(
            name=self.app_name,
            user_id=user_id,
            results=self.results,
            notes=self.notes,
        )

