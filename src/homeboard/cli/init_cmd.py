"""
Homeboard CLI - Init command.

Scaffold a dashboard project in the current directory:
- homeboard.json (site, calendar and AnkiConnect settings)
- data/music-ideas.json (calendar entries)
- data/books.json (fallback reading list)
- .env.example (Goodreads credentials template)

Existing files are left alone unless --force is given.
"""

import datetime as dt
import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from homeboard.core.config.loader import PROJECT_CONFIG_NAME, clear_cache
from homeboard.core.config.models import DEFAULT_ANKI_CONNECT_HOST

console = Console()
logger = logging.getLogger(__name__)

ENV_EXAMPLE = """\
# Goodreads API (leave empty to always use data/books.json)
GOODREADS_KEY=
GOODREADS_SECRET=
GOODREADS_USER_ID=

# AnkiConnect add-on endpoint
ANKI_CONNECT_HOST={anki_host}
"""


def _scaffold(today: dt.date) -> dict[str, Any]:
    """File name -> content for a new project."""
    project_config = {
        "site": {"title": "Dashboard"},
        "calendar": {"week_start": "monday"},
        "content": {"data_dir": "data"},
    }
    music_ideas = [
        {
            "date": today.isoformat(),
            "idea": "Sketch a chord progression in a new key",
            "link": None,
        }
    ]
    books = [{"title": "Your current book", "progress": 0, "pages": 300, "current": True}]
    return {
        PROJECT_CONFIG_NAME: project_config,
        "data/music-ideas.json": music_ideas,
        "data/books.json": books,
        ".env.example": ENV_EXAMPLE.format(anki_host=DEFAULT_ANKI_CONNECT_HOST),
    }


def _write(path: Path, content: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        path.write_text(content, encoding="utf-8")
    else:
        path.write_text(json.dumps(content, indent=2) + "\n", encoding="utf-8")


def init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing files",
    ),
) -> None:
    """
    Create homeboard.json and starter data files in the current directory.

    Examples:
        homeboard init
        homeboard init --force
    """
    project_dir = Path.cwd()
    created = 0

    for name, content in _scaffold(dt.date.today()).items():
        path = project_dir / name
        if path.exists() and not force:
            console.print(f"[dim]Skipped {name} (exists)[/dim]")
            continue
        _write(path, content)
        logger.debug("Wrote %s", path)
        console.print(f"[green]✓[/green] Created {name}")
        created += 1

    clear_cache()

    if created:
        console.print("\n[dim]Next: edit data/*.json, then run 'homeboard build'[/dim]")
    else:
        console.print("[yellow]Nothing to do; use --force to overwrite[/yellow]")
