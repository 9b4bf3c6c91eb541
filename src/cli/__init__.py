"""Main CLI application module."""

import typer

from .config_commands import config_app
from .dev_commands import dev_app

# Create the main CLI application
app = typer.Typer(
    help="📚 Bookstore CLI - development server and configuration tools",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(dev_app, name="dev")
app.add_typer(config_app, name="config")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
