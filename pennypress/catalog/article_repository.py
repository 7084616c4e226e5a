"""
Article repository - storage operations for raw articles.
"""

from datetime import datetime

from .models import RawArticle
from .store import MemoryStore


class ArticleRepository:
    """Repository for article operations."""

    def __init__(self, store: MemoryStore):
        self._store = store

    def add(
        self,
        title: str,
        excerpt: str,
        content: str,
        image_url: str,
        published_date: datetime,
        author_id: int,
        category: str,
        price: str,
        read_time: int,
        featured: bool = False,
        publication: str | None = None,
    ) -> int:
        """Add a new article. Returns article ID."""
        with self._store.transaction() as store:
            article_id = store.next_id("articles")
            store.articles[article_id] = RawArticle(
                id=article_id,
                title=title,
                excerpt=excerpt,
                content=content,
                image_url=image_url,
                published_date=published_date,
                author_id=author_id,
                category=category,
                price=price,
                read_time=read_time,
                featured=featured,
                publication=publication,
            )
            return article_id

    def get(self, article_id: int) -> RawArticle | None:
        """Get single article by ID."""
        return self._store.articles.get(article_id)

    def get_all(self) -> list[RawArticle]:
        """Get all articles in insertion order."""
        with self._store.transaction() as store:
            return list(store.articles.values())

    def count(self) -> int:
        """Number of stored articles."""
        return len(self._store.articles)
