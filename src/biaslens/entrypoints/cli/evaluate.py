"""``biaslens evaluate`` — run the bias protocols against an app and report.

Interactive by default: each protocol is shown with its steps and the
evaluator marks it PASS or FAIL (or skips it). Outcomes can also be given
up front with ``--result ID=STATUS`` for scripted use.
"""

from __future__ import annotations

import click

from biaslens.domain.errors import DomainError
from biaslens.service_layer.evaluation import RECORDABLE_STATUSES, EvaluationSession
from biaslens.service_layer.reports import Report, build_report

from .catalog_cmds import echo_template
from .context import get_app, require_user
from .helpers import error, success
from .helpers.colors import rgb

SKIP = "skip"
RECORDABLE = tuple(status.value for status in RECORDABLE_STATUSES)
CHOICES = (*RECORDABLE, SKIP)


def _split_item(item: str, metavar: str) -> tuple[int, str]:
    key, sep, rest = item.partition("=")
    try:
        template_id = int(key)
    except ValueError as e:
        raise click.BadParameter(f"Expected {metavar}, got {item!r}") from e
    if not sep:
        raise click.BadParameter(f"Expected {metavar}, got {item!r}")
    return template_id, rest


def _parse_results(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[int, str]:
    """Click callback turning ID=STATUS items into a template id → status mapping.

    Only PASS and FAIL are accepted, in any case.
    """
    parsed: dict[int, str] = {}
    for item in value:
        template_id, status = _split_item(item, "ID=STATUS")
        status = status.strip().upper()
        if status not in RECORDABLE:
            raise click.BadParameter(
                f"Status must be one of {', '.join(RECORDABLE)}, got {item!r}"
            )
        parsed[template_id] = status
    return parsed


def _parse_notes(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[int, str]:
    """Click callback turning ID=TEXT items into a template id → notes mapping.

    The text may be empty.
    """
    return dict(_split_item(item, "ID=TEXT") for item in value)



def echo_report(report: Report) -> None:
    """Print a report: score, recommendation and detailed findings."""
    title = f"Bias report for {report.app_name}" if report.app_name else "Bias report"
    click.secho(title, bold=True, underline=True)
    if report.score is None:
        click.secho(report.band.recommendation, fg=rgb(report.band.color))
        return
    click.secho(
        f"Score: {report.score:.1f} / 10", fg=rgb(report.band.color), bold=True
    )
    click.echo(report.band.recommendation)
    if report.lines:
        click.echo()
        click.secho("Detailed findings", bold=True)
        for line in report.lines:
            click.secho(
                f"  {line.title}: {line.verdict}",
                fg="green" if line.passed else "red",
            )
            if line.notes:
                click.echo(f"      {line.notes}")


def _run_interactively(session: EvaluationSession) -> None:
    for template in session.templates:
        click.echo()
        echo_template(template)
        choice = click.prompt(
            "    Result",
            type=click.Choice(CHOICES, case_sensitive=False),
            default=SKIP,
            show_choices=True,
        )
        if choice.lower() == SKIP:
            continue
        session.start(template.id)
        notes = click.prompt("    Notes", default="", show_default=False)
        session.record(choice, notes)


@click.command()
@click.argument("app_name")
@click.option(
    "--result",
    "-r",
    "results",
    multiple=True,
    callback=_parse_results,
    metavar="ID=STATUS",
    help="Record a protocol outcome without prompting (e.g. -r 1=PASS). Repeatable.",
)
@click.option(
    "--notes",
    "-n",
    "notes",
    multiple=True,
    callback=_parse_notes,
    metavar="ID=TEXT",
    help="Notes for a protocol given with --result. Repeatable.",
)
@click.pass_context
def evaluate(
    ctx: click.Context,
    app_name: str,
    results: dict[int, str],
    notes: dict[int, str],
) -> None:
    """Evaluate APP_NAME against the bias protocols and print its report."""
    unmatched = sorted(set(notes) - set(results))
    if unmatched:
        raise click.UsageError(
            "--notes needs a --result for the same protocol "
            f"(missing for {', '.join(map(str, unmatched))})."
        )

    app = get_app(ctx)
    user = require_user(app)

    try:
        session = EvaluationSession(app_name, app.templates)
        if results:
            for template_id, status in results.items():
                session.start(template_id)
                session.record(status, notes.get(template_id, ""))
        else:
            _run_interactively(session)
    except DomainError as e:
        raise click.ClickException(str(e)) from e

    if not session.has_results:
        error("No protocols were completed; there is nothing to report.")
        raise click.exceptions.Exit(1)

    outcome = app.message_bus.handle(session.to_command(user["id"]))
    if not outcome:
        error(outcome.message)
        raise click.exceptions.Exit(1)

    report = build_report(app.store, test_id=outcome.value, user_id=user["id"])
    success(f"Saved evaluation #{outcome.value} of {session.app_name}.")
    if report is not None:
        click.echo()
        echo_report(report)
