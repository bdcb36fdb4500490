"""Anki review counter backed by a local AnkiConnect service."""

from .client import AnkiConnectClient, AnkiConnectError
from .service import AnkiStat, fetch_review_count

__all__ = ["AnkiConnectClient", "AnkiConnectError", "AnkiStat", "fetch_review_count"]
