"""CLI interface for slatecheck using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from slatecheck import __description__, __version__
from slatecheck.config import LogLevel, SlatecheckConfig, ValidatorConfig, load_config
from slatecheck.exceptions import DocumentLoadError
from slatecheck.loader import load_document
from slatecheck.validation import RULES, DocumentValidator

app = typer.Typer(
    name="slatecheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def _setup_logging(config: SlatecheckConfig) -> None:
    """Route log records through Rich at the configured level."""
    logging.basicConfig(
        level=_LOG_LEVELS.get(config.logging.level, logging.INFO),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config_or_exit(config: Optional[Path]) -> SlatecheckConfig:
    try:
        return load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"slatecheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """slatecheck - Structural validator for slate rich-text documents."""


@app.command()
def validate(
    path: Annotated[
        Path,
        typer.Argument(help="Path to a JSON file holding the document (array of nodes)")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .slatecheck.json)")
    ] = None,
    max_depth: Annotated[
        Optional[int],
        typer.Option("--max-depth", help="Override the maximum nesting depth")
    ] = None,
) -> None:
    """Validate a document and report the first violation."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    slatecheck_config = _load_config_or_exit(config)
    if max_depth is not None:
        try:
            validator_config = ValidatorConfig(**{**slatecheck_config.validator.model_dump(), "max_depth": max_depth})
            slatecheck_config = slatecheck_config.model_copy(update={"validator": validator_config})
        except ValueError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    _setup_logging(slatecheck_config)

    try:
        document = load_document(path)
    except DocumentLoadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    result = DocumentValidator(slatecheck_config).validate(document)

    if format == "json":
        console.print_json(jsonlib.dumps(result.to_dict()))
    elif result.is_valid:
        console.print(f"[green]Valid:[/green] {escape(str(path))}")
    else:
        console.print(f"[red]Invalid:[/red] {escape(str(path))}")
        issue_table = Table(show_header=False)
        issue_table.add_column("Field", style="cyan")
        issue_table.add_column("Value", style="white")
        issue_table.add_row("Error Key", escape(result.error_key))
        issue_table.add_row("Error", escape(result.error))
        issue_table.add_row("Message", escape(result.user_friendly_message))
        issue_table.add_row("Node Type", result.node_type or "-")
        issue_table.add_row("Path", escape(result.location) or "-")
        console.print(issue_table)

    raise typer.Exit(0 if result.is_valid else 1)


@app.command()
def rules(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .slatecheck.json)")
    ] = None,
) -> None:
    """List the structural rule for each element type."""
    slatecheck_config = _load_config_or_exit(config)

    table = Table(title="Element Rules")
    table.add_column("Rule", style="cyan")
    table.add_column("Types", style="white")
    table.add_column("Children", style="white")
    table.add_column("Recurses", style="dim")

    seen = set()
    for rule in RULES.values():
        if rule.name in seen:
            continue
        seen.add(rule.name)
        summary = rule.describe(slatecheck_config.validator)
        table.add_row(rule.name, summary["types"], summary["children"], summary["recurses"])

    console.print(table)


if __name__ == "__main__":
    app()
