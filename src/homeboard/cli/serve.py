"""
Homeboard CLI - Serve command.

Serve the dashboard page and the widget APIs with uvicorn.
"""

import logging
import threading
import time
import webbrowser

import typer
from rich.console import Console

from homeboard.cli._common import load_project_config

console = Console()
logger = logging.getLogger(__name__)


def serve(
    ctx: typer.Context,
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Interface to bind",
    ),
    port: int = typer.Option(
        8080,
        "--port",
        "-p",
        help="Port to run the server on",
    ),
    no_browser: bool = typer.Option(
        False,
        "--no-browser",
        help="Don't open browser automatically",
    ),
) -> None:
    """
    Serve the dashboard.

    Examples:
        homeboard serve                  # Launch on default port 8080
        homeboard serve --port 3000      # Launch on port 3000
        homeboard serve --no-browser     # Don't open browser
    """
    debug = ctx.obj.get("debug", False) if ctx.obj else False

    # Primes the config cache the request handlers read
    config = load_project_config()

    try:
        import uvicorn

        from homeboard.core.dashboard.api.app import app as fastapi_app
    except ImportError as e:
        console.print(
            "[red]Error:[/red] Server dependencies not installed. "
            f"Missing module: {e.name}"
        )
        console.print("[dim]Install with: pip install fastapi uvicorn[/dim]")
        raise typer.Exit(1)

    url = f"http://{'localhost' if host in ('127.0.0.1', '0.0.0.0') else host}:{port}"
    console.print("[bold cyan]Starting dashboard server...[/bold cyan]")
    console.print(f"[dim]Data: {config.content.data_dir}[/dim]")
    console.print(f"[dim]AnkiConnect: {config.anki.host}[/dim]")
    if not config.goodreads.has_credentials:
        console.print("[yellow]Goodreads credentials not set; using fallback reading list[/yellow]")

    if not no_browser:

        def open_browser() -> None:
            time.sleep(1.5)  # Wait for server to start
            console.print(f"\n[green]Opening browser:[/green] {url}")
            webbrowser.open(url)

        threading.Thread(target=open_browser, daemon=True).start()

    console.print("\n[dim]Press Ctrl+C to stop[/dim]\n")

    try:
        uvicorn.run(
            fastapi_app,
            host=host,
            port=port,
            log_level="info" if debug else "warning",
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Dashboard stopped[/yellow]")
