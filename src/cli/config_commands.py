"""Configuration inspection commands."""

import json

import typer
from rich.console import Console

from src.bookstore.runtime.context import get_config

console = Console()
config_app = typer.Typer(help="⚙️  Configuration commands")


@config_app.command(name="show")
def show(
    section: str | None = typer.Option(
        None, help="Only print one section (app, logging, books)"
    ),
) -> None:
    """Print the effective configuration as JSON."""
    data = get_config().model_dump(mode="json")
    if section is not None:
        if section not in data:
            console.print(f"[red]Unknown section '{section}'. Choose from: {', '.join(data)}[/red]")
            raise typer.Exit(1)
        data = data[section]
    console.print_json(json.dumps(data))
