"""
Dashboard page renderer.

Renders the single dashboard page from the Jinja2 templates shipped with the
package. The calendar is rendered server-side; the reading and review
widgets are shells the page script fills from the JSON endpoints on load.
The same output is served at GET / and written by `homeboard build`.
"""

import datetime as dt
import logging
from pathlib import Path

from jinja2 import Environment, PackageLoader, StrictUndefined

from homeboard import __version__
from homeboard.core.calendar.grid import CalendarGrid, build_calendar_grid
from homeboard.core.config.models import HomeboardConfig
from homeboard.core.content.store import ContentError, load_music_ideas

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "index.html.j2"
READING_ENDPOINT = "/api/goodreads"
ANKI_ENDPOINT = "/api/anki"

_environment: Environment | None = None


def get_environment() -> Environment:
    """Return the shared Jinja2 environment (templates live in this package)."""
    global _environment
    if _environment is None:
        _environment = Environment(
            loader=PackageLoader("homeboard.core.dashboard", "templates"),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _environment


def load_calendar(
    config: HomeboardConfig,
    today: dt.date,
    strict: bool = False,
) -> CalendarGrid:
    """
    Build the calendar grid from the music-ideas file.

    Args:
        config: Loaded configuration
        today: Date to highlight
        strict: Re-raise ContentError instead of rendering an empty calendar

    Raises:
        ContentError: Only when strict is True and the file is malformed
    """
    try:
        ideas = load_music_ideas(config.content.music_ideas_path)
    except ContentError as e:
        if strict:
            raise
        logger.error("Music ideas unavailable, rendering empty calendar: %s", e)
        ideas = []
    return build_calendar_grid(ideas, today, config.calendar.week_start)


def render_page(
    config: HomeboardConfig,
    today: dt.date | None = None,
    strict: bool = False,
) -> str:
    """
    Render the dashboard HTML.

    Args:
        config: Loaded configuration
        today: Date to highlight (defaults to the local date)
        strict: Fail on a malformed music-ideas file instead of degrading

    Returns:
        Complete HTML document
    """
    if today is None:
        today = dt.date.today()

    grid = load_calendar(config, today, strict=strict)
    template = get_environment().get_template(PAGE_TEMPLATE)
    api_base = config.site.api_base
    return template.render(
        title=config.site.title,
        grid=grid,
        today=today,
        reading_url=f"{api_base}{READING_ENDPOINT}",
        anki_url=f"{api_base}{ANKI_ENDPOINT}",
        version=__version__,
    )


def write_site(
    config: HomeboardConfig,
    output_dir: Path | None = None,
    today: dt.date | None = None,
) -> Path:
    """
    Write the static site (index.html) to output_dir.

    Returns:
        Path of the written index.html

    Raises:
        ContentError: If the music-ideas file is malformed
        OSError: If the output directory cannot be written
    """
    if output_dir is None:
        output_dir = config.site.output_dir

    html = render_page(config, today=today, strict=True)
    output_dir.mkdir(parents=True, exist_ok=True)
    index_path = output_dir / "index.html"
    index_path.write_text(html, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", index_path, len(html))
    return index_path
