"""
Pytest configuration and shared fixtures.

Provides fixtures for an isolated environment, a sample project directory
with content files, loaded configs, and canned Goodreads/AnkiConnect replies.
"""

import datetime as dt
import json
from pathlib import Path

import httpx
import pytest

from homeboard.core.config import clear_cache
from homeboard.core.config.models import ContentConfig, GoodreadsConfig, HomeboardConfig

ENV_VARS = [
    "GOODREADS_KEY",
    "GOODREADS_SECRET",
    "GOODREADS_USER_ID",
    "ANKI_CONNECT_HOST",
    "HOMEBOARD_DATA_DIR",
]

TODAY = dt.date(2026, 10, 19)

# ==============================================================================
# Canned remote responses
# ==============================================================================

REVIEW_LIST_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GoodreadsResponse>
  <reviews start="1" end="2" total="2">
    <review>
      <id>1</id>
      <book>
        <title><![CDATA[Finished Book]]></title>
        <num_pages>200</num_pages>
      </book>
      <shelves>
        <shelf name="read" exclusive="true" />
      </shelves>
    </review>
    <review>
      <id>2</id>
      <book>
        <title><![CDATA[The Left Hand of Darkness]]></title>
        <num_pages>304</num_pages>
      </book>
      <shelves>
        <shelf name="currently-reading" exclusive="true" />
      </shelves>
    </review>
  </reviews>
</GoodreadsResponse>
"""

EMPTY_SHELF_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GoodreadsResponse>
  <reviews start="1" end="1" total="1">
    <review>
      <book><title>Old Book</title><num_pages>99</num_pages></book>
      <shelves><shelf name="read" /></shelves>
    </review>
  </reviews>
</GoodreadsResponse>
"""


def static_transport(status_code: int = 200, **kwargs) -> httpx.MockTransport:
    """Transport that answers every request with the same response."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, **kwargs)

    transport = httpx.MockTransport(handler)
    transport.requests = requests  # type: ignore[attr-defined]
    return transport


def failing_transport(message: str = "Connection refused") -> httpx.MockTransport:
    """Transport that raises a connection error for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(message, request=request)

    return httpx.MockTransport(handler)


# ==============================================================================
# Environment isolation
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the developer's env, user config and config cache out of tests."""
    for var in ENV_VARS:
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    clear_cache()
    yield
    clear_cache()


# ==============================================================================
# Project Fixtures
# ==============================================================================


@pytest.fixture
def music_ideas():
    """Raw music-idea entries as stored on disk."""
    return [
        {"date": "2026-10-01", "idea": "Write a bassline in 7/8", "link": None},
        {"date": "2026-10-19", "idea": "Resample the field recording"},
        {
            "date": "2026-10-19",
            "idea": "Try the new reverb",
            "link": "https://example.com/reverb",
        },
        {"date": "2026-11-02", "idea": "Next month"},
    ]


@pytest.fixture
def books():
    """Raw fallback reading list as stored on disk."""
    return [
        {"title": "Finished Earlier", "progress": 100, "pages": 180, "current": False},
        {"title": "Piranesi", "progress": 45, "pages": 272, "current": True},
    ]


@pytest.fixture
def project_dir(tmp_path, music_ideas, books):
    """
    Provide a project directory with config and content files.

    Creates:
    - homeboard.json
    - data/music-ideas.json
    - data/books.json
    """
    project = tmp_path / "project"
    data = project / "data"
    data.mkdir(parents=True)

    (project / "homeboard.json").write_text(
        json.dumps({"site": {"title": "Test Board"}}, indent=2)
    )
    (data / "music-ideas.json").write_text(json.dumps(music_ideas))
    (data / "books.json").write_text(json.dumps(books))
    return project


@pytest.fixture
def config(project_dir) -> HomeboardConfig:
    """Config pointing at the project's data directory, no Goodreads credentials."""
    return HomeboardConfig(content=ContentConfig(data_dir=project_dir / "data"))


@pytest.fixture
def goodreads_config(config) -> HomeboardConfig:
    """Same as `config`, with Goodreads credentials set."""
    return config.model_copy(
        update={
            "goodreads": GoodreadsConfig(key="ck", secret="cs", user_id="12345"),
        }
    )


@pytest.fixture
def data_dir(project_dir) -> Path:
    return project_dir / "data"


# ==============================================================================
# Remote Fixtures
# ==============================================================================


@pytest.fixture
def review_list_xml() -> str:
    return REVIEW_LIST_XML


@pytest.fixture
def empty_shelf_xml() -> str:
    return EMPTY_SHELF_XML


@pytest.fixture
def make_transport():
    """Factory for a MockTransport answering every request the same way."""
    return static_transport


@pytest.fixture
def offline_transport():
    """MockTransport that fails every request with a connection error."""
    return failing_transport()


@pytest.fixture
def today() -> dt.date:
    return TODAY
