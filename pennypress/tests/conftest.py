"""
Pytest fixtures for backend tests.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from pennypress.catalog import ArticleCatalog
from pennypress.config import state
from pennypress.server import app

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Controllable clock for catalog tests."""

    def __init__(self, now: datetime = NOW):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def catalog(clock):
    """Empty catalog on a fixed clock."""
    return ArticleCatalog(now=clock)


def _add_author(catalog: ArticleCatalog, name: str = "Sarah Johnson", username: str = "sarahj") -> int:
    """Create a user plus author and return the author id."""
    user = catalog.create_user(
        username=username,
        password="secret",
        name=name,
        email=f"{username}@example.com",
        avatar_url=f"https://example.com/{username}.png",
        bio=f"{name} writes things.",
    )
    return catalog.create_author(user.id, description="Staff Writer").id


def _add_article(catalog: ArticleCatalog, author_id: int, **overrides):
    """Create an article with sensible defaults."""
    fields = {
        "title": "Test Article",
        "excerpt": "A short excerpt.",
        "content": "<p>Some content.</p>",
        "image_url": "https://example.com/image.jpg",
        "author_id": author_id,
        "category": "Technology",
        "price": "0.10",
        "read_time": 5,
        "published_date": NOW - timedelta(days=1),
        "featured": False,
    }
    fields.update(overrides)
    return catalog.create_article(**fields)


@pytest.fixture
def make_author(catalog):
    """Factory for authors in the test catalog."""
    def make(name: str = "Sarah Johnson", username: str = "sarahj") -> int:
        return _add_author(catalog, name=name, username=username)
    return make


@pytest.fixture
def make_article(catalog):
    """Factory for articles in the test catalog."""
    def make(author_id: int, **overrides):
        return _add_article(catalog, author_id, **overrides)
    return make


@pytest.fixture
def populated_catalog(catalog, clock):
    """Catalog with two authors, four articles and one reader."""
    tech_author = _add_author(catalog)
    science_author = _add_author(catalog, name="Michael Chen", username="mchen")
    reader = catalog.create_user(
        username="reader", password="secret", name="Alex Rivera", email="alex@example.com"
    )

    quantum = _add_article(
        catalog, tech_author,
        title="Computing Breakthroughs",
        excerpt="New machines are coming.",
        content="<p>The quantum era is near.</p>",
        published_date=NOW - timedelta(days=3),
        featured=True,
    )
    telescope = _add_article(
        catalog, science_author,
        title="Telescope Finds Old Galaxies",
        category="Science",
        content="<p>The telescope saw far.</p>",
        price="0.15",
        published_date=NOW - timedelta(days=1),
    )
    health = _add_article(
        catalog, science_author,
        title="Sleep Matters",
        category="Health",
        excerpt="A telescope was not involved.",
        published_date=NOW - timedelta(days=2),
    )
    robots = _add_article(
        catalog, tech_author,
        title="Robots Fold Laundry",
        published_date=NOW - timedelta(hours=5),
        featured=True,
    )

    return {
        "catalog": catalog,
        "clock": clock,
        "reader_id": reader.id,
        "author_ids": [tech_author, science_author],
        "articles": {
            "quantum": quantum.id,
            "telescope": telescope.id,
            "health": health.id,
            "robots": robots.id,
        },
    }


@pytest.fixture
def client(catalog):
    """Create a test client over an empty catalog."""
    original_catalog = state.catalog
    state.catalog = catalog

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    state.catalog = original_catalog


@pytest.fixture
def client_with_data(populated_catalog):
    """Test client with sample data pre-populated."""
    original_catalog = state.catalog
    state.catalog = populated_catalog["catalog"]

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client, populated_catalog

    state.catalog = original_catalog
