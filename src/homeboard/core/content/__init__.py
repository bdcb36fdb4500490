"""Hand-edited content: music ideas and the fallback reading list."""

from .models import Book, MusicIdea
from .store import ContentError, find_current_book, load_books, load_music_ideas

__all__ = [
    "Book",
    "ContentError",
    "MusicIdea",
    "find_current_book",
    "load_books",
    "load_music_ideas",
]
