"""CLI output utilities."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from restlist.controller import ViewState
from restlist.core.models import Restaurant, RestaurantList
from restlist.registry import ListRegistry


def print_success(console: Console, message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(console: Console, message: str) -> None:
    """Print error message."""
    console.print(f"[red]Error:[/red] {message}")


def print_warning(console: Console, message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def format_rating(rating: float | None) -> str:
    """Format a rating for display."""
    return "-" if rating is None else f"{rating:g}"


def lists_table(registry: ListRegistry) -> Table:
    """Build the table of all lists, marking the selected one.

    Args:
        registry: Registry to render

    Returns:
        Rich table with index, name and size columns
    """
    table = Table(title="Restaurant Lists", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("List", style="cyan")
    table.add_column("Restaurants", justify="right")

    selected = registry.selected_index
    for i, restaurant_list in enumerate(registry):
        marker = "▶ " if i == selected else ""
        table.add_row(str(i + 1), f"{marker}{restaurant_list.name}", str(len(restaurant_list)))

    return table


def restaurants_table(
    title: str, restaurants: Iterable[Restaurant]
) -> Table:
    """Build a table of restaurants with their ratings."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Restaurant", style="cyan")
    table.add_column("Rating", justify="right")

    for i, restaurant in enumerate(restaurants):
        table.add_row(str(i + 1), restaurant.name, format_rating(restaurant.rating))

    return table


def list_table(restaurant_list: RestaurantList) -> Table:
    """Build the table of restaurants in one list."""
    return restaurants_table(restaurant_list.name, restaurant_list)


def view_table(view: ViewState) -> Table:
    """Build the table for the controller's active view."""
    title = view.list_name if view.has_selection else "No list selected"
    return restaurants_table(title, view.restaurants)
