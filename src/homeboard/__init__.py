"""
Homeboard - Personal Dashboard

A small site that shows a music-idea calendar, a "currently reading" widget
and an Anki review counter.
"""

__version__ = "0.3.0"

# Re-export core models for convenience
from homeboard.core.config.models import HomeboardConfig
from homeboard.core.content.models import Book, MusicIdea

__all__ = ["Book", "HomeboardConfig", "MusicIdea", "__version__"]
