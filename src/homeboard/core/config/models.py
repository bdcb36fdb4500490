"""
Configuration data models for homeboard.

These models define the structure of homeboard.json and
~/.config/homeboard/config.json, with validation via Pydantic.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ANKI_CONNECT_HOST = "http://localhost:8765"
DEFAULT_GOODREADS_URL = "https://www.goodreads.com"


class WeekStart(str, Enum):
    """First day of the week in the calendar grid."""

    MONDAY = "monday"
    SUNDAY = "sunday"


class GoodreadsConfig(BaseModel):
    """
    Goodreads API credentials.

    All three values must be set for a remote lookup to be attempted;
    otherwise the reading widget answers from the fallback file.
    """

    key: Optional[str] = Field(default=None, description="OAuth consumer key")
    secret: Optional[str] = Field(default=None, description="OAuth consumer secret")
    user_id: Optional[str] = Field(default=None, description="Goodreads user id")
    base_url: str = Field(
        default=DEFAULT_GOODREADS_URL,
        description="Base URL of the Goodreads API",
    )

    @property
    def has_credentials(self) -> bool:
        """True when key, secret and user id are all present."""
        return bool(self.key and self.secret and self.user_id)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class AnkiConfig(BaseModel):
    """Location of the local AnkiConnect service."""

    host: str = Field(
        default=DEFAULT_ANKI_CONNECT_HOST,
        description="AnkiConnect URL (host and port)",
    )


class ContentConfig(BaseModel):
    """
    Hand-edited data files.

    Relative paths are resolved against the project directory by the loader.
    """

    data_dir: Path = Field(default=Path("data"), description="Directory holding the data files")
    music_ideas_file: str = Field(
        default="music-ideas.json",
        description="JSON array of dated music ideas",
    )
    books_file: str = Field(
        default="books.json",
        description="JSON array of books used when Goodreads is unavailable",
    )

    @property
    def music_ideas_path(self) -> Path:
        return self.data_dir / self.music_ideas_file

    @property
    def books_path(self) -> Path:
        return self.data_dir / self.books_file


class CalendarConfig(BaseModel):
    """Calendar grid layout."""

    week_start: WeekStart = Field(
        default=WeekStart.MONDAY,
        description="Day the grid's weeks start on",
    )


class SiteConfig(BaseModel):
    """Page rendering and static build output."""

    title: str = Field(default="Dashboard", description="Page title")
    output_dir: Path = Field(default=Path("dist"), description="Static build output directory")
    api_base: str = Field(
        default="",
        description="Prefix for the widget API URLs (empty: same origin as the page)",
    )

    @field_validator("api_base")
    @classmethod
    def strip_api_base(cls, v: str) -> str:
        return v.rstrip("/")


class HomeboardConfig(BaseModel):
    """
    Top-level homeboard configuration.

    Example homeboard.json:
        {
          "site": {"title": "My Dashboard"},
          "calendar": {"week_start": "sunday"},
          "anki": {"host": "http://localhost:8765"}
        }

    Credentials are normally supplied through the environment
    (GOODREADS_KEY, GOODREADS_SECRET, GOODREADS_USER_ID).
    """

    model_config = ConfigDict(extra="ignore")

    goodreads: GoodreadsConfig = Field(default_factory=GoodreadsConfig)
    anki: AnkiConfig = Field(default_factory=AnkiConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
