"""
Pydantic models for the hand-edited dashboard content.

- MusicIdea: one dated entry on the music-idea calendar
- Book: one record in the reading list (remote or fallback)
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class MusicIdea(BaseModel):
    """A music idea pinned to a calendar date."""

    model_config = ConfigDict(frozen=True)

    date: dt.date = Field(..., description="Calendar date the idea belongs to")
    idea: str = Field(..., description="Free text")
    link: Optional[HttpUrl] = Field(default=None, description="Optional reference URL")


class Book(BaseModel):
    """
    A book in the reading widget.

    Books from Goodreads are only partially populated: the API does not
    expose reading progress, so progress is always 0 for them.
    """

    title: str
    progress: int = Field(default=0, ge=0, le=100, description="Percent read")
    pages: int = Field(default=0, ge=0)
    current: bool = False
