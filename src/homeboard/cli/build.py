"""
Homeboard CLI - Build command.

Render the dashboard to a static index.html.
"""

import datetime as dt
import logging
from pathlib import Path

import typer
from rich.console import Console

from homeboard.cli._common import load_project_config
from homeboard.core.content.store import ContentError
from homeboard.core.dashboard.renderer import write_site

console = Console()
logger = logging.getLogger(__name__)


def _parse_date(value: str | None) -> dt.date | None:
    if value is None:
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not a YYYY-MM-DD date")


def build(
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: site.output_dir from config)",
    ),
    date: str | None = typer.Option(
        None,
        "--date",
        help="Render the calendar as of this date (YYYY-MM-DD)",
    ),
) -> None:
    """
    Write the static dashboard page.

    The widgets in the written page fetch /api/goodreads and /api/anki when
    it loads; set site.api_base when those are served from another origin.

    Examples:
        homeboard build
        homeboard build -o public --date 2026-10-01
    """
    today = _parse_date(date)
    config = load_project_config()

    try:
        index_path = write_site(config, output_dir=output, today=today)
    except ContentError as e:
        console.print(f"[red]Error:[/red] Cannot read {e.path.name}: {e.reason}")
        console.print(f"[dim]{e.path}[/dim]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot write site: {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Wrote {index_path}")
