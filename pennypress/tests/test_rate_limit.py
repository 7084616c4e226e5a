"""
Tests for per-address rate limiting.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pennypress.config import state
from pennypress.rate_limit import build_limiter, setup_rate_limiting
from pennypress.routes import misc_router


def _client_for(per_minute: int) -> TestClient:
    app = FastAPI()
    setup_rate_limiting(app, build_limiter(per_minute))
    app.include_router(misc_router)
    return TestClient(app)


@pytest.fixture
def catalog_state(catalog):
    original_catalog = state.catalog
    state.catalog = catalog
    yield catalog
    state.catalog = original_catalog


class TestRateLimiting:
    """Requests beyond the per-minute budget are rejected with 429."""

    def test_limit_exceeded(self, catalog_state):
        with _client_for(2) as client:
            assert client.get("/api/status").status_code == 200
            assert client.get("/api/status").status_code == 200

            response = client.get("/api/status")
            assert response.status_code == 429
            assert "Retry-After" in response.headers
            assert response.json()["detail"].startswith("Rate limit exceeded")

    def test_zero_disables_limiting(self, catalog_state):
        limiter = build_limiter(0)
        assert limiter.enabled is False

        app = FastAPI()
        setup_rate_limiting(app, limiter)
        app.include_router(misc_router)
        with TestClient(app) as client:
            for _ in range(5):
                assert client.get("/api/status").status_code == 200
