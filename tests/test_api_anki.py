"""
Tests for the dashboard API anki endpoint.

Tests validate:
- GET /api/anki on success and on failure
- Failure is a 200 with a zeroed, flagged body
- Cache-Control headers for both outcomes
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from homeboard.core.anki.service import AnkiStat
from homeboard.core.dashboard.api.app import app
from homeboard.core.dashboard.api.deps import get_config


@pytest.fixture
def client(config):
    app.dependency_overrides[get_config] = lambda: config
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAnkiEndpoint:
    """Tests for GET /api/anki endpoint."""

    def test_success(self, client):
        with patch(
            "homeboard.core.dashboard.api.routes.anki.fetch_review_count",
            new=AsyncMock(return_value=AnkiStat(today=33, error=False)),
        ):
            response = client.get("/api/anki")

        assert response.status_code == 200
        assert response.json() == {"today": 33, "error": False}
        assert response.headers["cache-control"] == (
            "public, s-maxage=300, stale-while-revalidate=600"
        )

    def test_failure_is_soft(self, client):
        stat = AnkiStat(today=0, error=True, message="AnkiConnect is offline or unreachable")
        with patch(
            "homeboard.core.dashboard.api.routes.anki.fetch_review_count",
            new=AsyncMock(return_value=stat),
        ):
            response = client.get("/api/anki")

        assert response.status_code == 200
        data = response.json()
        assert data["today"] == 0
        assert data["error"] is True
        assert data["message"] == "AnkiConnect is offline or unreachable"
        assert response.headers["cache-control"] == (
            "public, s-maxage=60, stale-while-revalidate=300"
        )

    def test_unreachable_host_end_to_end(self, client, config):
        # Nothing listens on port 9 (discard); the real client must soft-fail
        config.anki.host = "http://127.0.0.1:9"

        response = client.get("/api/anki")

        assert response.status_code == 200
        assert response.json()["today"] == 0
        assert response.json()["error"] is True

    def test_malformed_host_is_soft_failure(self, client, config):
        config.anki.host = "http://localhost:99999"

        response = client.get("/api/anki")

        assert response.status_code == 200
        assert response.json()["today"] == 0
        assert response.json()["error"] is True
        assert response.headers["cache-control"] == (
            "public, s-maxage=60, stale-while-revalidate=300"
        )

    def test_uses_config_from_dependency(self, client, config):
        mock_fetch = AsyncMock(return_value=AnkiStat(today=1, error=False))
        with patch("homeboard.core.dashboard.api.routes.anki.fetch_review_count", new=mock_fetch):
            client.get("/api/anki")

        mock_fetch.assert_awaited_once_with(config.anki)
