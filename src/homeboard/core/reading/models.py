"""Models for the reading-progress resolver."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from homeboard.core.content.models import Book


class ReadingSource(str, Enum):
    """Which source answered the reading lookup."""

    GOODREADS = "goodreads"
    FALLBACK = "fallback"


class ReadingState(str, Enum):
    """
    Outcome of a reading lookup.

    - ACTIVE: Goodreads answered with a currently-reading book
    - NO_ACTIVE_BOOK: Goodreads answered, but the shelf is empty
    - FALLBACK: Goodreads failed; the book (if any) comes from the local file
    """

    ACTIVE = "active"
    NO_ACTIVE_BOOK = "no_active_book"
    FALLBACK = "fallback"


class ReadingStatus(BaseModel):
    """Response body of GET /api/goodreads."""

    error: bool = False
    book: Optional[Book] = None
    message: Optional[str] = None
    source: ReadingSource = Field(..., description="Source that produced this answer")
    transient: bool = Field(
        default=False,
        exclude=True,
        description="Failure expected to clear on its own; cache only briefly",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def state(self) -> ReadingState:
        if self.source == ReadingSource.FALLBACK:
            return ReadingState.FALLBACK
        if self.book is None:
            return ReadingState.NO_ACTIVE_BOOK
        return ReadingState.ACTIVE
