"""
Homeboard CLI - Status command.

Query Goodreads and AnkiConnect once and show what each widget would display.
"""

import asyncio
import json as json_module

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from homeboard.cli._common import load_project_config
from homeboard.core.anki.service import AnkiStat, fetch_review_count
from homeboard.core.config.models import HomeboardConfig
from homeboard.core.reading.models import ReadingState, ReadingStatus
from homeboard.core.reading.resolver import resolve_reading

console = Console()


async def _gather(config: HomeboardConfig) -> tuple[ReadingStatus, AnkiStat]:
    reading, anki = await asyncio.gather(
        resolve_reading(config),
        fetch_review_count(config.anki),
    )
    return reading, anki


def _reading_row(reading: ReadingStatus) -> tuple[str, str, str]:
    # Titles and messages come from remote or hand-edited data; never markup
    if reading.state == ReadingState.ACTIVE and reading.book is not None:
        shows = f"{escape(reading.book.title)} ({reading.book.pages} pages)"
        return "[green]ok[/green]", "goodreads", shows
    if reading.state == ReadingState.NO_ACTIVE_BOOK:
        return "[green]ok[/green]", "goodreads", escape(reading.message or "No currently reading book")

    book = reading.book.title if reading.book else "no current book in fallback file"
    shows = f"{escape(book)} [dim]({escape(reading.message or '')})[/dim]"
    return "[yellow]fallback[/yellow]", "fallback", shows


def _anki_row(anki: AnkiStat) -> tuple[str, str, str]:
    if anki.error:
        return "[yellow]offline[/yellow]", "placeholder", f"0 [dim]({escape(anki.message or '')})[/dim]"
    return "[green]ok[/green]", "ankiconnect", f"{anki.today} cards reviewed today"


def status(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output both widget payloads as JSON",
    ),
) -> None:
    """
    Check the reading and review sources.

    Never fails: an unreachable source is reported, not raised.
    """
    config = load_project_config()
    reading, anki = asyncio.run(_gather(config))

    if json_output:
        payload = {
            "goodreads": reading.model_dump(mode="json"),
            "anki": anki.model_dump(mode="json", exclude_none=True),
        }
        console.print_json(json_module.dumps(payload))
        return

    table = Table(title="Dashboard sources")
    table.add_column("Widget", style="bold")
    table.add_column("Status")
    table.add_column("Answered by")
    table.add_column("Shows")

    table.add_row("Currently reading", *_reading_row(reading))
    table.add_row("Anki reviews", *_anki_row(anki))
    console.print(table)
