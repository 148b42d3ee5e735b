from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from hotel_filters.domain.models import Hotel
from hotel_filters.filters import apply_filter
from hotel_filters.search import affordable_room_predicate, five_star_predicate


def format_section(title: str, hotels: Iterable[Hotel]) -> str:
    """
    Render a titled bullet list of hotel names.

    An empty list still produces the header, followed by an empty line.
    """
    bullets = "\n".join(f"* {hotel.name}" for hotel in hotels)
    return f"{title}:\n{bullets}"


def render_report(hotels: Sequence[Hotel]) -> str:
    """
    Build the fixed two-section report: five-star hotels, then affordable ones.
    """
    return "\n".join(
        [
            format_section("5* Hotels", apply_filter(hotels, five_star_predicate)),
            format_section("Affordable Hotels", apply_filter(hotels, affordable_room_predicate)),
        ]
    )


def print_hotels_table(hotels: Sequence[Hotel], console: Optional[Console] = None) -> None:
    """
    Render hotels as a rich table, in the order given.
    """
    console = console or Console()

    if not hotels:
        console.print("[yellow]No hotels match the given criteria.[/yellow]")
        return

    table = Table(
        title="Hotels",
        box=box.ROUNDED,
        caption=f"{len(hotels)} match(es)",
    )

    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Stars", justify="right", style="magenta")
    table.add_column("User Rating", justify="right", style="green")
    table.add_column("Distance (km)", justify="right", style="blue")
    table.add_column("Price (EUR)", justify="right", style="bold green")
    table.add_column("24/7 Reception", justify="center", style="yellow")

    for hotel in hotels:
        table.add_row(
            hotel.name,
            "★" * hotel.star_rating.value,
            f"{hotel.user_rating:.1f}",
            f"{hotel.distance_from_city_center:.1f}",
            f"{hotel.price_per_room:,.2f}",
            "yes" if hotel.reception_24_7 else "no",
        )

    console.print(table)


__all__ = ["format_section", "render_report", "print_hotels_table"]
