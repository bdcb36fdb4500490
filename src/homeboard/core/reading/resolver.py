"""
Reading-progress resolver.

Tries Goodreads first and falls back to the hand-maintained books file on
any failure. Nothing here raises: every outcome is a ReadingStatus.
"""

import logging

import httpx

from homeboard.core.config.models import HomeboardConfig
from homeboard.core.content.models import Book
from homeboard.core.content.store import ContentError, find_current_book, load_books

from .goodreads import GoodreadsClient, GoodreadsCredentialsError, GoodreadsError
from .models import ReadingSource, ReadingStatus

logger = logging.getLogger(__name__)

NO_CURRENT_BOOK_MESSAGE = "No currently reading book"


def load_fallback_book(config: HomeboardConfig) -> Book | None:
    """Return the current book from the fallback file, or None."""
    path = config.content.books_path
    try:
        return find_current_book(load_books(path))
    except ContentError as e:
        logger.error("Fallback reading list unusable: %s", e)
        return None


def fallback_status(
    config: HomeboardConfig, message: str, transient: bool = True
) -> ReadingStatus:
    return ReadingStatus(
        error=True,
        book=load_fallback_book(config),
        message=message,
        source=ReadingSource.FALLBACK,
        transient=transient,
    )


async def resolve_reading(
    config: HomeboardConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ReadingStatus:
    """
    Work out what is currently being read.

    Args:
        config: Loaded configuration (credentials and fallback file location)
        transport: Optional httpx transport, used by tests

    Returns:
        ReadingStatus from Goodreads when it answers, otherwise a fallback
        status carrying the failure reason
    """
    try:
        client = GoodreadsClient(config.goodreads, transport=transport)
    except GoodreadsCredentialsError as e:
        logger.warning("%s; using fallback reading list", e)
        return fallback_status(config, str(e), transient=False)

    try:
        book = await client.get_currently_reading()
    except GoodreadsError as e:
        logger.error("Goodreads API error: %s", e)
        return fallback_status(config, str(e))

    if book is None:
        return ReadingStatus(
            error=False,
            book=None,
            message=NO_CURRENT_BOOK_MESSAGE,
            source=ReadingSource.GOODREADS,
        )

    return ReadingStatus(error=False, book=book, source=ReadingSource.GOODREADS)
