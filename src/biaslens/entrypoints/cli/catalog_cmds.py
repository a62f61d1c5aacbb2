"""Read-only catalog commands: the bias protocols and the reference resources."""

import click

from biaslens.domain.models import BiasTestTemplate

from .context import get_app
from .helpers import hyperlink
from .helpers.colors import rgb


def echo_template(template: BiasTestTemplate) -> None:
    """Print one protocol with its steps and metrics."""
    click.secho(f"[{template.id}] {template.title}", fg=rgb(template.color), bold=True)
    click.echo(f"    {template.description}")
    click.secho("    Steps:", underline=True)
    for step in template.steps:
        click.echo(f"      {step}")
    click.secho("    Metrics:", underline=True)
    for metric in template.metrics:
        click.echo(f"      - {metric}")


@click.command()
@click.pass_context
def templates(ctx: click.Context) -> None:
    """List the bias test protocols (UNESCO/OECD guidelines)."""
    for index, template in enumerate(get_app(ctx).templates):
        if index:
            click.echo()
        echo_template(template)


@click.command()
@click.option("--category", "-c", help="Only show resources of this category.")
@click.pass_context
def resources(ctx: click.Context, category: str | None) -> None:
    """List reference documents and tools on AI fairness in education."""
    shown = [
        resource
        for resource in get_app(ctx).resources
        if category is None or resource.category.lower() == category.lower()
    ]
    if not shown:
        click.echo(f"No resources in category {category!r}.")
        return
    for resource in shown:
        click.secho(f"{resource.title}  ", bold=True, nl=False)
        click.secho(f"[{resource.category}]", fg="blue")
        click.echo(f"    {resource.description}")
        click.echo(f"    {hyperlink(resource.url)}")
