"""Shared FastAPI dependencies."""

from homeboard.core.config.loader import load_config
from homeboard.core.config.models import HomeboardConfig


def get_config() -> HomeboardConfig:
    """
    Configuration for request handlers.

    Uses the process-wide cached config; tests replace this dependency via
    app.dependency_overrides.
    """
    return load_config()
