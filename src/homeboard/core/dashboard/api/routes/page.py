"""
Page route for the dashboard.

- GET / - The dashboard HTML, rendered for today's date
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from homeboard.core.config.models import HomeboardConfig
from homeboard.core.dashboard.api.deps import get_config
from homeboard.core.dashboard.renderer import render_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def get_page(config: HomeboardConfig = Depends(get_config)) -> HTMLResponse:
    """Render the dashboard page (reads the ideas file, so runs in the threadpool)."""
    return HTMLResponse(render_page(config))
