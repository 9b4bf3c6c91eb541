"""Development environment CLI commands."""

import subprocess
import sys
from pathlib import Path

import requests
import typer
from rich.console import Console
from rich.panel import Panel

from src.bookstore.runtime.context import get_config
from src.bookstore.runtime.settings import EnvironmentVariables

PROJECT_ROOT = Path(__file__).resolve().parents[2]

console = Console()
dev_app = typer.Typer(help="🚀 Development environment commands")


def build_server_command(host: str, port: int, reload: bool, log_level: str) -> list[str]:
    """Build the uvicorn command line for the API."""
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "src.bookstore.api.http.app:app",
        "--host",
        host,
        "--port",
        str(port),
        "--log-level",
        log_level,
    ]
    if reload:
        cmd.extend(["--reload", "--reload-dir", "src"])
    return cmd


def run_server(cmd: list[str]) -> None:
    """Run the server in the foreground from the project root."""
    try:
        subprocess.run(cmd, cwd=PROJECT_ROOT, check=True)
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Server exited with code {e.returncode}[/red]")
        raise typer.Exit(e.returncode) from e


@dev_app.command(name="start-server")
def start_server(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config app.host)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config app.port)"),
    reload: bool = typer.Option(True, help="Enable auto-reload on code changes"),
    log_level: str | None = typer.Option(
        None, help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the Bookstore API with uvicorn.
    """
    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port
    log_level = (log_level or EnvironmentVariables().log_level).lower()

    console.print(
        Panel.fit(
            "[bold green]Starting Bookstore API[/bold green]",
            border_style="green",
        )
    )

    cmd = build_server_command(host, port, reload, log_level)
    console.print(f"[blue]Running:[/blue] {' '.join(cmd)}")
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    try:
        run_server(cmd)
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")


@dev_app.command(name="health")
def health(
    base_url: str | None = typer.Option(
        None, help="API base URL (defaults to BASE_URL)"
    ),
    timeout: float = typer.Option(5.0, help="Request timeout in seconds"),
) -> None:
    """
    🩺 Check that a running API answers on /health.
    """
    url = f"{(base_url or EnvironmentVariables().base_url).rstrip('/')}/health"
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        console.print(f"[red]✗ {url} unreachable: {e}[/red]")
        raise typer.Exit(1) from e

    if response.status_code != 200:
        console.print(f"[red]✗ {url} returned {response.status_code}[/red]")
        raise typer.Exit(1)

    data = response.json()
    console.print(
        f"[green]✓ {data.get('service', 'api')} is {data.get('status')}[/green] "
        f"({data.get('books', 0)} book(s) in memory)"
    )
