"""
Reading API routes for the dashboard.

- GET /api/goodreads - Currently-reading book from Goodreads, or the local fallback
"""

from fastapi import APIRouter, Depends, Response

from homeboard.core.config.models import HomeboardConfig
from homeboard.core.dashboard.api.deps import get_config
from homeboard.core.reading.models import ReadingStatus
from homeboard.core.reading.resolver import resolve_reading

router = APIRouter()

CACHE_OK = "public, s-maxage=600, stale-while-revalidate=1800"
CACHE_ERROR = "public, s-maxage=60, stale-while-revalidate=300"


@router.get("/goodreads", response_model=ReadingStatus)
async def get_goodreads(
    response: Response,
    config: HomeboardConfig = Depends(get_config),
) -> ReadingStatus:
    """
    Get the book currently being read.

    Always answers 200. `source` says who answered and `state` is one of
    active, no_active_book or fallback. Transient Goodreads failures are
    cached briefly; missing credentials are not expected to change soon.

    Example response:
        {
          "error": false,
          "book": {"title": "Dune", "progress": 0, "pages": 412, "current": true},
          "message": null,
          "source": "goodreads",
          "state": "active"
        }
    """
    status = await resolve_reading(config)
    response.headers["Cache-Control"] = CACHE_ERROR if status.transient else CACHE_OK
    return status
