"""
Review-count proxy.

Asks AnkiConnect how many cards were reviewed today. Failures never
propagate: the caller always gets an AnkiStat, zeroed and flagged on error.
"""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel

from homeboard.core.config.models import AnkiConfig

from .client import AnkiConnectClient, AnkiConnectError

logger = logging.getLogger(__name__)


class AnkiStat(BaseModel):
    """Response body of GET /api/anki."""

    today: int = 0
    error: Optional[bool] = None
    message: Optional[str] = None


async def fetch_review_count(
    config: AnkiConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AnkiStat:
    """
    Fetch today's review count.

    Returns:
        AnkiStat(today=n, error=False) on success, or
        AnkiStat(today=0, error=True, message=reason) on any failure
    """
    client = AnkiConnectClient(config.host, transport=transport)
    try:
        today = await client.cards_reviewed_today()
    except (AnkiConnectError, ValueError, TypeError) as e:
        logger.error("AnkiConnect error: %s", e)
        return AnkiStat(today=0, error=True, message=str(e) or "AnkiConnect offline")

    return AnkiStat(today=today, error=False)
