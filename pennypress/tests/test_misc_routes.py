"""
Tests for misc routes and app wiring: health check, startup seeding.
"""

from fastapi.testclient import TestClient

from pennypress import __version__
from pennypress.config import config, state
from pennypress.server import app


class TestHealthCheck:
    """Tests for /api/status endpoint."""

    def test_health_check_returns_ok(self, client):
        """Health check should return status ok."""
        response = client.get("/api/status")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == __version__
        assert data["articles"] == 0

    def test_health_check_counts_articles(self, client_with_data):
        client, data = client_with_data
        assert client.get("/api/status").json()["articles"] == 4


class TestStartup:
    """The lifespan builds and seeds a catalog when none is set."""

    def test_seeds_mock_data(self, monkeypatch):
        original_catalog = state.catalog
        state.catalog = None
        monkeypatch.setattr(config, "SEED_ON_STARTUP", True)
        monkeypatch.setattr(config, "SEED_PATH", None)
        try:
            with TestClient(app) as client:
                featured = client.get("/api/articles/featured").json()
                assert len(featured) >= 1
                assert all(a["featured"] for a in featured)
                assert client.get("/api/status").json()["articles"] > 0
        finally:
            state.catalog = original_catalog

    def test_seeding_disabled(self, monkeypatch):
        original_catalog = state.catalog
        state.catalog = None
        monkeypatch.setattr(config, "SEED_ON_STARTUP", False)
        try:
            with TestClient(app) as client:
                assert client.get("/api/articles").json() == []
        finally:
            state.catalog = original_catalog
