"""``biaslens community`` — share and read reviews of an app."""

from __future__ import annotations

import click

from biaslens.domain.models import MAX_RATING, MIN_RATING, Review
from biaslens.service_layer.commands import AddReview

from .context import get_app, require_user
from .helpers import error, success

STAR, NO_STAR = "★", "☆"


def stars(rating: int) -> str:
    return STAR * rating + NO_STAR * (MAX_RATING - rating)


def echo_review(review: Review) -> None:
    click.secho(f"{stars(review.rating)}  {review.app_name}", fg="yellow", nl=False)
    click.echo(f"  by {review.author}, {review.timestamp:%Y-%m-%d}")
    click.echo(f"    {review.comment}")


@click.command()
@click.argument("app_name")
@click.option(
    "--rating",
    "-r",
    type=click.IntRange(MIN_RATING, MAX_RATING),
    help="Post a review with this rating without prompting.",
)
@click.option("--comment", "-c", help="Comment for the review posted with --rating.")
@click.option(
    "--post/--no-post",
    default=True,
    show_default=True,
    help="Offer to post reviews before listing them.",
)
@click.pass_context
def community(
    ctx: click.Context,
    app_name: str,
    rating: int | None,
    comment: str | None,
    post: bool,
) -> None:
    """Post reviews of APP_NAME, then list its reviews and average rating."""
    app = get_app(ctx)

    if rating is not None or comment is not None:
        if rating is None or not comment:
            raise click.UsageError("--rating and --comment must be given together.")
        _post(ctx, app_name, rating, comment)
    elif post:
        while click.confirm(f"Write a review of {app_name}?", default=False):
            new_rating = click.prompt(
                "Rating", type=click.IntRange(MIN_RATING, MAX_RATING)
            )
            new_comment = click.prompt("Comment")
            _post(ctx, app_name, new_rating, new_comment)

    name = app_name.strip()
    reviews = app.store.get_reviews(app_name=name)
    average = app.store.get_average_rating(name)
    rated = sum(1 for review in reviews if review.app_name == name)

    click.echo()
    if not reviews:
        click.echo(f"No reviews for {app_name} yet.")
        return
    if average is not None:
        click.secho(f"{name}: {average:.1f} / {MAX_RATING} ({rated} ratings)", bold=True)
    for review in reviews:
        echo_review(review)


def _post(ctx: click.Context, app_name: str, rating: int, comment: str) -> None:
    app = get_app(ctx)
    user = require_user(app)
    outcome = app.message_bus.handle(
        AddReview(
            app_name=app_name,
            rating=rating,
            comment=comment,
            user_id=user["id"],
            author=user["username"],
        )
    )
    if not outcome:
        error(outcome.message)
        raise click.exceptions.Exit(1)
    success(f"Review #{outcome.value} posted.")
