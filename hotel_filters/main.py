from __future__ import annotations

import sys
from typing import List, Optional

import typer
from pydantic import ValidationError

from hotel_filters.config import get_settings
from hotel_filters.domain.catalog import sample_hotels
from hotel_filters.domain.models import StarRating
from hotel_filters.reporter import format_section, print_hotels_table, render_report
from hotel_filters.search import SearchCriteria, search_hotels
from hotel_filters.utils.logging import configure_logging

app = typer.Typer(help="Hotel attribute filter demo.")

_CRITERIA_OPTIONS = {
    "star_ratings": "--stars",
    "min_price": "--min-price",
    "max_price": "--max-price",
    "min_user_rating": "--min-rating",
    "max_user_rating": "--max-rating",
    "max_distance": "--max-distance",
}


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """
    Print the five-star and affordable hotel report when no command is given.
    """
    if ctx.invoked_subcommand is None:
        report()


@app.command()
def report() -> None:
    """
    Print the five-star and affordable hotel report.
    """
    _setup_logging()
    typer.echo(render_report(sample_hotels()))


@app.command()
def search(
    stars: Optional[List[int]] = typer.Option(
        None,
        "--stars",
        "-s",
        help="Accepted star rating (1-5). Repeat for several; omit to accept all.",
    ),
    min_price: Optional[float] = typer.Option(None, "--min-price", help="Lowest room price in EUR."),
    max_price: Optional[float] = typer.Option(None, "--max-price", help="Highest room price in EUR."),
    min_rating: Optional[float] = typer.Option(None, "--min-rating", help="Lowest guest rating (0-10)."),
    max_rating: Optional[float] = typer.Option(None, "--max-rating", help="Highest guest rating (0-10)."),
    max_distance: Optional[float] = typer.Option(
        None, "--max-distance", help="Furthest distance from the city center in km."
    ),
    reception_24_7: bool = typer.Option(
        False, "--reception-24-7", help="Only hotels with round-the-clock reception."
    ),
    table: bool = typer.Option(False, "--table", "-t", help="Render results as a table."),
) -> None:
    """
    Filter the sample hotels by the given criteria.
    """
    _setup_logging()
    try:
        star_ratings = [StarRating(value) for value in stars or []]
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--stars") from exc
    try:
        criteria = SearchCriteria(
            star_ratings=star_ratings,
            min_price=min_price,
            max_price=max_price,
            min_user_rating=min_rating,
            max_user_rating=max_rating,
            max_distance=max_distance,
            reception_24_7=True if reception_24_7 else None,
        )
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else ""
        message = str(error.get("ctx", {}).get("error", error["msg"]))
        raise typer.BadParameter(message, param_hint=_CRITERIA_OPTIONS.get(field)) from exc
    matches = search_hotels(sample_hotels(), criteria)

    if table:
        print_hotels_table(matches)
    else:
        typer.echo(format_section("Matching Hotels", matches))


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} "
        f"log_json={settings.log_json} | hotels={len(sample_hotels())}"
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
