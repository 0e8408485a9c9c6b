"""Output formatters for evaluation results."""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pantrymatch.catalog.models import Preference
from pantrymatch.matcher.pipeline import Evaluation

OUTPUT_FORMATS = ("text", "table", "json", "markdown")


def _sorted_unsatisfied(evaluation: Evaluation) -> list[Preference]:
    return sorted(evaluation.unsatisfied, key=lambda preference: preference.name)


class TextFormatter:
    """Plain two-section report, one block per run."""

    def format(self, evaluation: Evaluation, label: str) -> str:
        """Return the report as a string.

        Args:
            evaluation: Evaluation to format
            label: Run label shown in the header line

        Returns:
            Report text
        """
        recipes = ", ".join(f"'{name}'" for name in sorted(evaluation.possible_recipes))
        people = ", ".join(
            f"{{name: '{p.name}', prefers: '{p.prefers}'}}"
            for p in _sorted_unsatisfied(evaluation)
        )
        lines = [
            f"--- {label} ---",
            f"What can we make: [{recipes}]",
            f"People left unstatisfied: [{people}]",
            "---------",
        ]
        return "\n".join(lines)


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, evaluation: Evaluation, label: str) -> None:
        """Print formatted tables to console."""
        closure = sorted(evaluation.closure or evaluation.pantry)
        header_lines = [
            f"[bold]{label}[/bold]",
            f"On hand: {', '.join(sorted(evaluation.pantry)) or '(nothing)'}",
            f"Closure: {', '.join(closure) or '(nothing)'}",
        ]
        self.console.print(Panel("\n".join(header_lines), title="Pantry"))

        recipe_table = Table(title="What can we make")
        recipe_table.add_column("Recipe", style="cyan")
        for name in sorted(evaluation.possible_recipes):
            recipe_table.add_row(name)
        self.console.print(recipe_table)

        unsatisfied = _sorted_unsatisfied(evaluation)
        if not unsatisfied:
            self.console.print("[green]Everyone is satisfied[/green]")
            return

        people_table = Table(title="People left unsatisfied")
        people_table.add_column("Name", style="cyan")
        people_table.add_column("Prefers")
        people_table.add_column("Missing", style="red")
        for preference in unsatisfied:
            people_table.add_row(
                preference.name,
                preference.prefers,
                ", ".join(evaluation.missing.get(preference.name, [])),
            )
        self.console.print(people_table)


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, evaluation: Evaluation, label: str) -> str:
        data = {
            "label": label,
            "pantry": sorted(evaluation.pantry),
            "closure": sorted(evaluation.closure) if evaluation.closure is not None else None,
            "possible_recipes": sorted(evaluation.possible_recipes),
            "unsatisfied": [
                {"name": p.name, "prefers": p.prefers}
                for p in _sorted_unsatisfied(evaluation)
            ],
            "missing": {name: list(items) for name, items in evaluation.missing.items()},
        }
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown."""

    def format(self, evaluation: Evaluation, label: str) -> str:
        lines = [f"# {label}", "", "## What can we make", ""]
        recipes = sorted(evaluation.possible_recipes)
        lines.extend(f"- {name}" for name in recipes)
        if not recipes:
            lines.append("_Nothing_")

        lines.extend(
            [
                "",
                "## People left unsatisfied",
                "",
                "| Name | Prefers | Missing |",
                "|------|---------|---------|",
            ]
        )
        for p in _sorted_unsatisfied(evaluation):
            missing = ", ".join(evaluation.missing.get(p.name, []))
            lines.append(f"| {p.name} | {p.prefers} | {missing} |")

        return "\n".join(lines)


def format_result(
    evaluation: Evaluation,
    output_format: str = "text",
    label: str = "pantrymatch",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format an evaluation in the specified format.

    Args:
        evaluation: Evaluation to format
        output_format: One of 'text', 'table', 'json', 'markdown'
        label: Run label
        console: Rich console (for table format)

    Returns:
        Formatted string for text/json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format(evaluation, label)
        return None
    elif output_format == "text":
        return TextFormatter().format(evaluation, label)
    elif output_format == "json":
        return JSONFormatter().format(evaluation, label)
    elif output_format == "markdown":
        return MarkdownFormatter().format(evaluation, label)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
