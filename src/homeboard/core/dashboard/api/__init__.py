"""
FastAPI application for the homeboard dashboard.

API Endpoints:
- GET / - Dashboard page
- GET /api/goodreads - Currently-reading book (Goodreads or local fallback)
- GET /api/anki - Cards reviewed today (AnkiConnect)
- GET /health - Health check

Usage:
    uvicorn homeboard.core.dashboard.api.app:app --reload
"""

from homeboard.core.dashboard.api.app import app

__all__ = ["app"]
