"""CLI commands for the relay."""

from typing import Optional

import typer
from rich.console import Console

from strillone import __version__
from strillone.core.config import get_settings
from strillone.core.logging import setup_logging

app = typer.Typer(name="strillone", help="DNSimple webhook relay CLI")
console = Console()


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"[bold green]{get_settings().app_name} v{__version__}[/bold green]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind (default HOST)"),
    port: Optional[int] = typer.Option(None, help="Port to bind (default PORT)"),
) -> None:
    """Start the relay server.

    Args:
        host: Host to bind
        port: Port to bind
    """
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    host = host or settings.host
    port = port or settings.port

    console.print(f"[yellow]{settings.app_name} listening on {host}:{port}...[/yellow]")
    # uvicorn exits the process when the port cannot be bound.
    uvicorn.run("strillone.api.app:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    app()
