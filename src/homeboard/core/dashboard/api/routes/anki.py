"""
Anki API routes for the dashboard.

- GET /api/anki - Cards reviewed today, proxied from the local AnkiConnect service
"""

from fastapi import APIRouter, Depends, Response

from homeboard.core.anki.service import AnkiStat, fetch_review_count
from homeboard.core.config.models import HomeboardConfig
from homeboard.core.dashboard.api.deps import get_config

router = APIRouter()

CACHE_OK = "public, s-maxage=300, stale-while-revalidate=600"
CACHE_ERROR = "public, s-maxage=60, stale-while-revalidate=300"


@router.get("/anki", response_model=AnkiStat, response_model_exclude_none=True)
async def get_anki(
    response: Response,
    config: HomeboardConfig = Depends(get_config),
) -> AnkiStat:
    """
    Get the number of cards reviewed today.

    Always answers 200. When AnkiConnect is unreachable or reports an error
    the body is zeroed and flagged, and cached for a shorter time.

    Example responses:
        {"today": 42, "error": false}
        {"today": 0, "error": true, "message": "AnkiConnect is offline or unreachable"}
    """
    stat = await fetch_review_count(config.anki)
    response.headers["Cache-Control"] = CACHE_ERROR if stat.error else CACHE_OK
    return stat
