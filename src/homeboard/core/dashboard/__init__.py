"""
Dashboard page and HTTP surface for homeboard.

The dashboard consists of:
- Renderer (renderer.py) - Jinja2 page with the music-idea calendar
- API layer (api/) - FastAPI app serving the page and the widget endpoints
"""

from .renderer import render_page, write_site

__all__ = ["render_page", "write_site"]
