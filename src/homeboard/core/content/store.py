"""
Readers for the hand-edited JSON content files.

Both files are flat JSON arrays. They are read fresh on every call; nothing
here caches or writes.
"""

import json
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .models import Book, MusicIdea

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ContentError(Exception):
    """A content file exists but cannot be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def _load_array(path: Path, model: type[ModelT]) -> list[ModelT]:
    """
    Load a JSON array of objects and validate each item.

    A missing file is an empty list. Anything else that is wrong with the
    file raises ContentError naming the file and the offending item.
    """
    if not path.exists():
        logger.debug("Content file %s does not exist", path)
        return []

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ContentError(path, f"invalid JSON ({e})") from e
    except OSError as e:
        raise ContentError(path, f"cannot read file ({e})") from e

    if not isinstance(data, list):
        raise ContentError(path, "top level must be a JSON array")

    items: list[ModelT] = []
    for index, raw in enumerate(data):
        try:
            items.append(model.model_validate(raw))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first.get("loc", ()))
            raise ContentError(
                path, f"item {index}: {field + ': ' if field else ''}{first['msg']}"
            ) from e
    return items


def load_music_ideas(path: Path) -> list[MusicIdea]:
    """Load the music-idea calendar entries, in file order."""
    return _load_array(path, MusicIdea)


def load_books(path: Path) -> list[Book]:
    """Load the fallback reading list."""
    return _load_array(path, Book)


def find_current_book(books: list[Book]) -> Book | None:
    """Return the first book flagged as currently being read."""
    return next((book for book in books if book.current), None)
