"""CLI interface using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pantrymatch.catalog import Catalog, get_default_catalog, load_catalog_from_yaml
from pantrymatch.config import get_settings
from pantrymatch.config.settings import Settings, default_config_path
from pantrymatch.exceptions import PantryMatchError, UnknownIngredientError
from pantrymatch.export import OUTPUT_FORMATS, format_result
from pantrymatch.matcher import Evaluation, evaluate
from pantrymatch.matcher.pipeline import CLOSURE_MODES

app = typer.Typer(
    help="Which recipes can we make from the pantry, and who goes hungry",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Manage pantrymatch settings")
app.add_typer(config_app, name="config")

# Labels of the four equivalent evaluation styles shown by `demo`
DEMO_LABELS = ("v1.1", "v1.2", "v1.1 with Monads", "v1.2 with Monads")


# ============================================================================
# Helpers
# ============================================================================


def configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else get_settings().logging.level
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_catalog(catalog_path: Optional[Path]) -> Catalog:
    """Load the catalog from --catalog, the settings file, or the built-in data.

    Raises typer.Exit(1) with a friendly message if the file can't be used.
    """
    path = catalog_path or get_settings().catalog.path
    if path is None:
        return get_default_catalog()
    try:
        return load_catalog_from_yaml(path)
    except FileNotFoundError:
        console.print(f"[red]Catalog file not found: {path}[/red]")
        raise typer.Exit(1)
    except PantryMatchError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def adjust_pantry(
    catalog: Catalog,
    add: Optional[list[str]],
    remove: Optional[list[str]],
) -> list[str]:
    """Apply --add/--remove to the catalog's pantry.

    Raises:
        UnknownIngredientError: If an added item isn't a known ingredient
    """
    pantry = list(catalog.pantry)
    for item in add or []:
        if item not in catalog.ingredients:
            raise UnknownIngredientError(item)
        if item not in pantry:
            pantry.append(item)
    removed = set(remove or [])
    return [item for item in pantry if item not in removed]


def run_evaluation(
    catalog_path: Optional[Path],
    mode: Optional[str],
    add: Optional[list[str]],
    remove: Optional[list[str]],
) -> Evaluation:
    """Load, adjust and evaluate, turning errors into a red message and exit 1."""
    settings = get_settings()
    mode = mode or settings.resolver.mode
    if mode not in CLOSURE_MODES:
        console.print(f"[red]Unknown closure mode: {mode}[/red]")
        console.print(f"Choose one of: {', '.join(CLOSURE_MODES)}")
        raise typer.Exit(1)

    catalog = load_catalog(catalog_path)
    try:
        pantry = adjust_pantry(catalog, add, remove)
        return evaluate(catalog, pantry=pantry, mode=mode)
    except PantryMatchError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


# ============================================================================
# Main Commands
# ============================================================================


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
) -> None:
    """Pantrymatch: recipes from ingredients on hand."""
    configure_logging(verbose)


@app.command()
def run(
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="YAML catalog file (default: built-in pasta catalog)"
    ),
    label: str = typer.Option("pantrymatch", "--label", "-l", help="Run label"),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: text, table, json, markdown"
    ),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Closure mode: single or full"
    ),
    add: Optional[list[str]] = typer.Option(
        None, "--add", "-a", help="Add an ingredient to the pantry (repeatable)"
    ),
    remove: Optional[list[str]] = typer.Option(
        None, "--remove", "-r", help="Remove an ingredient from the pantry (repeatable)"
    ),
) -> None:
    """Show what we can make and who is left unsatisfied."""
    output_format = output_format or get_settings().output.format
    if output_format not in OUTPUT_FORMATS:
        console.print(f"[red]Unknown output format: {output_format}[/red]")
        raise typer.Exit(1)

    evaluation = run_evaluation(catalog_path, mode, add, remove)
    output = format_result(evaluation, output_format, label=label, console=console)
    if output is not None:
        typer.echo(output)


@app.command()
def closure(
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="YAML catalog file"
    ),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Closure mode: single or full"
    ),
    add: Optional[list[str]] = typer.Option(None, "--add", "-a", help="Add an ingredient"),
    remove: Optional[list[str]] = typer.Option(
        None, "--remove", "-r", help="Remove an ingredient"
    ),
) -> None:
    """Show the ingredients on hand plus everything derivable from them."""
    evaluation = run_evaluation(catalog_path, mode, add, remove)
    derived = sorted((evaluation.closure or frozenset()) - evaluation.pantry)

    table = Table(title="Ingredient Closure")
    table.add_column("Ingredient", style="cyan")
    table.add_column("Source")
    for name in sorted(evaluation.closure or frozenset()):
        table.add_row(name, "derived" if name in derived else "on hand")
    console.print(table)


@app.command()
def recipes(
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="YAML catalog file"
    ),
) -> None:
    """List recipes and what they require."""
    catalog = load_catalog(catalog_path)

    table = Table(title="Recipes")
    table.add_column("Recipe", style="cyan")
    table.add_column("Requires")
    table.add_column("Optional", style="dim")
    for recipe in catalog.recipes:
        name = recipe.name
        if name == catalog.derivable:
            name += " *"
        table.add_row(name, ", ".join(recipe.ingredients), ", ".join(recipe.optional))
    console.print(table)
    if catalog.derivable:
        console.print(f"[dim]* {catalog.derivable} can be used as an ingredient[/dim]")


@app.command()
def missing(
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="YAML catalog file"
    ),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m", help="Closure mode: single or full"
    ),
    add: Optional[list[str]] = typer.Option(None, "--add", "-a", help="Add an ingredient"),
    remove: Optional[list[str]] = typer.Option(
        None, "--remove", "-r", help="Remove an ingredient"
    ),
) -> None:
    """Show what to buy so that nobody is left unsatisfied."""
    evaluation = run_evaluation(catalog_path, mode, add, remove)
    if not evaluation.missing:
        console.print("[green]Everyone is satisfied, nothing to buy[/green]")
        return

    table = Table(title="Shopping needed")
    table.add_column("Name", style="cyan")
    table.add_column("Missing", style="red")
    for name in sorted(evaluation.missing):
        table.add_row(name, ", ".join(evaluation.missing[name]))
    console.print(table)

    to_buy = sorted({item for items in evaluation.missing.values() for item in items})
    console.print(f"To buy: [bold]{', '.join(to_buy)}[/bold]")


@app.command()
def demo() -> None:
    """Run the built-in pasta party under each of the four evaluation labels."""
    catalog = get_default_catalog()
    for label in DEMO_LABELS:
        evaluation = evaluate(catalog)
        typer.echo("")
        typer.echo(format_result(evaluation, "text", label=label))
        typer.echo("")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Show the effective settings."""
    settings = get_settings()
    table = Table(title=f"Settings ({default_config_path()})")
    table.add_column("Section", style="cyan")
    table.add_column("Key")
    table.add_column("Value")
    for section, values in settings.to_dict().items():
        for key, value in values.items():
            table.add_row(section, key, str(value))
    console.print(table)


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a config file with default settings."""
    path = default_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)
    Settings().save(path)
    console.print(f"[green]Wrote {path}[/green]")


if __name__ == "__main__":
    app()
