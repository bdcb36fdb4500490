"""Currently-reading lookup: Goodreads with a local fallback."""

from .goodreads import (
    GoodreadsClient,
    GoodreadsCredentialsError,
    GoodreadsError,
    parse_currently_reading,
)
from .models import ReadingSource, ReadingState, ReadingStatus
from .resolver import resolve_reading

__all__ = [
    "GoodreadsClient",
    "GoodreadsCredentialsError",
    "GoodreadsError",
    "ReadingSource",
    "ReadingState",
    "ReadingStatus",
    "parse_currently_reading",
    "resolve_reading",
]
