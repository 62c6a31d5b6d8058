"""
Compatibility Engine Command Line Interface

Provides CLI commands for inspecting the engine configuration and scoring
listings stored as JSON files against a user's preferences.
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="compat-engine",
    help="Listing Compatibility Engine CLI",
    add_completion=False,
)
console = Console()


def _score_style(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _read_json(path: Path, what: str) -> Any:
    """Load a JSON file, exiting with an error message if it can't be read."""
    if not path.exists():
        console.print(f"[red]Error: {what} file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Error reading {what} file: {e}[/red]")
        raise typer.Exit(1)


def _load_preferences(path: Path):
    from compat_engine.data.models import UserPreferences

    data = _read_json(path, "Preferences")
    try:
        return UserPreferences.model_validate(data)
    except ValidationError as e:
        console.print(f"[red]Error: Invalid preferences: {e}[/red]")
        raise typer.Exit(1)


@app.callback()
def main():
    """Configure logging before any command runs."""
    from compat_engine.utils.logger import setup_logging

    setup_logging()


@app.command()
def version():
    """Show application version."""
    from compat_engine import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from compat_engine.utils.config import get_settings

    settings = get_settings()

    table = Table(title="Compatibility Engine Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Cache Enabled", str(settings.cache.enabled))
    table.add_row("Cache TTL (s)", str(settings.cache.ttl_seconds))
    table.add_row("Cache Cleanup Interval (s)", str(settings.cache.cleanup_interval_seconds))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def categories():
    """List the supported categories and their scoring dimensions."""
    from compat_engine.core.compatibility import get_compatibility_engine

    engine = get_compatibility_engine()

    table = Table(title="Supported Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Scorer")
    table.add_column("Dimensions", style="green")

    for category in engine.supported_categories:
        scorer = engine.get_scorer(category)
        names = getattr(scorer, "dimension_names", ())
        table.add_row(category, type(scorer).__name__, ", ".join(names))

    console.print(table)


@app.command()
def score(
    preferences_file: Path = typer.Argument(..., help="JSON file with the user's preferences"),
    listing_file: Path = typer.Argument(..., help="JSON file with the listing"),
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Listing category (defaults to the listing's own)"
    ),
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Category-aware suggestions"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Score a listing against a user's preferences."""
    from compat_engine.core.compatibility import get_compatibility_engine
    from compat_engine.data.models import DetailedCompatibilityRequest

    prefs = _load_preferences(preferences_file)
    listing = _read_json(listing_file, "Listing")
    if not isinstance(listing, dict):
        console.print("[red]Error: Listing file must contain a JSON object.[/red]")
        raise typer.Exit(1)

    category = category or listing.get("category")
    if not category:
        console.print("[red]Error: No category given and the listing has none.[/red]")
        raise typer.Exit(1)

    request = DetailedCompatibilityRequest(
        listing_id=str(listing.get("id") or ""),
        category=category,
        listing_data=listing,
        user_preferences=prefs,
        include_improvement_suggestions=detailed,
    )

    engine = get_compatibility_engine()
    result = engine.calculate_detailed_compatibility(request)

    if as_json:
        typer.echo(result.model_dump_json(by_alias=True, indent=2))
        return

    style = _score_style(result.overall_score)
    console.print(
        f"\n[bold]Overall compatibility:[/bold] "
        f"[{style}]{result.overall_score}/100[/{style}] ({result.score_level.value})"
    )
    console.print(f"[dim]{result.primary_match_reason}[/dim]\n")

    table = Table(title=f"{result.category} listing {result.listing_id or ''}".strip())
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Details")

    for dim in result.dimensions:
        dim_style = _score_style(dim.score)
        table.add_row(
            dim.name,
            f"[{dim_style}]{dim.score}[/{dim_style}]",
            f"{dim.weight:.2f}",
            dim.description,
        )

    console.print(table)

    if result.improvement_suggestions:
        console.print("\n[bold]Suggestions:[/bold]")
        for suggestion in result.improvement_suggestions:
            console.print(f"  • {suggestion}")


@app.command()
def rank(
    preferences_file: Path = typer.Argument(..., help="JSON file with the user's preferences"),
    listings_file: Path = typer.Argument(..., help="JSON file with an array of listings"),
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Category for listings that don't name one"
    ),
    limit: int = typer.Option(10, "--limit", "-n", help="Number of listings to show"),
):
    """Rank several listings for one user, best match first."""
    from compat_engine.core.compatibility import get_compatibility_engine

    prefs = _load_preferences(preferences_file)
    listings = _read_json(listings_file, "Listings")
    if not isinstance(listings, list):
        console.print("[red]Error: Listings file must contain a JSON array.[/red]")
        raise typer.Exit(1)

    engine = get_compatibility_engine()
    results = []
    for listing in listings:
        if not isinstance(listing, dict):
            console.print("[yellow]Skipping a listing that is not a JSON object.[/yellow]")
            continue
        listing_category = listing.get("category") or category
        if not listing_category:
            console.print(f"[yellow]Skipping listing {listing.get('id', '?')}: no category.[/yellow]")
            continue
        results.append(
            engine.calculate_compatibility(
                {
                    "listing_id": str(listing.get("id") or ""),
                    "category": listing_category,
                    "listing_data": listing,
                    "user_preferences": prefs,
                }
            )
        )

    if not results:
        console.print("[yellow]No listings to rank.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Ranked Listings")
    table.add_column("#", justify="right")
    table.add_column("Listing", style="cyan")
    table.add_column("Category")
    table.add_column("Score", justify="right")
    table.add_column("Reason")

    for position, result in enumerate(engine.rank_listings(results)[:limit], start=1):
        style = _score_style(result.overall_score)
        table.add_row(
            str(position),
            result.listing_id or "-",
            result.category,
            f"[{style}]{result.overall_score}[/{style}]",
            result.primary_match_reason,
        )

    console.print(table)


if __name__ == "__main__":
    app()
