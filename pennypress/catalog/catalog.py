"""
Article catalog - the read/write facade over the in-memory repositories.

Every "not found" condition is soft: single lookups return None and list
queries silently leave out records whose relations do not resolve.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Callable

from .article_repository import ArticleRepository
from .comment_repository import CommentRepository
from .converters import to_article, to_author_info, to_comment_with_user
from .models import Article, Author, AuthorInfo, Comment, CommentWithUser, RawArticle, User
from .store import MemoryStore
from .user_repository import AuthorRepository, UserRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so every stored timestamp is comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ArticleCatalog:
    """
    Owns users, authors, articles and comments and answers queries with
    fully resolved Article views.
    """

    def __init__(self, store: MemoryStore | None = None, now: Callable[[], datetime] = utc_now):
        self._store = store or MemoryStore()
        self._now = now

        self.users = UserRepository(self._store)
        self.authors = AuthorRepository(self._store)
        self.articles = ArticleRepository(self._store)
        self.comments = CommentRepository(self._store)

    # ─────────────────────────────────────────────────────────────
    # Record creation (seeding)
    # ─────────────────────────────────────────────────────────────

    def create_user(
        self,
        username: str,
        password: str,
        name: str,
        email: str,
        avatar_url: str | None = None,
        bio: str | None = None,
    ) -> User:
        user_id = self.users.add(username, password, name, email, avatar_url, bio)
        return self.users.get(user_id)

    def create_author(self, user_id: int, description: str | None = None, followers: int = 0) -> Author:
        author_id = self.authors.add(user_id, description, followers)
        return self.authors.get(author_id)

    def create_article(
        self,
        title: str,
        excerpt: str,
        content: str,
        image_url: str,
        author_id: int,
        category: str,
        price: str,
        read_time: int,
        published_date: datetime | None = None,
        featured: bool = False,
        publication: str | None = None,
    ) -> RawArticle:
        """Add an article. Raises ValueError if price is not a finite decimal string."""
        try:
            valid_price = Decimal(price).is_finite()
        except InvalidOperation:
            valid_price = False
        if not valid_price:
            raise ValueError(f"Invalid price {price!r} for article {title!r}")

        article_id = self.articles.add(
            title=title,
            excerpt=excerpt,
            content=content,
            image_url=image_url,
            published_date=_as_utc(published_date or self._now()),
            author_id=author_id,
            category=category,
            price=price,
            read_time=read_time,
            featured=featured,
            publication=publication,
        )
        return self.articles.get(article_id)

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def article_count(self) -> int:
        return self.articles.count()

    def now(self) -> datetime:
        """Current time on the catalog clock."""
        return self._now()

    # ─────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────

    def get_article(self, article_id: int) -> Article | None:
        """Get a fully resolved article, or None if it or its author is missing."""
        with self._store.transaction():
            raw = self.articles.get(article_id)
            if raw is None:
                return None
            return self._resolve(raw, self._now())

    def list_articles(self, category: str | None = None, search: str | None = None) -> list[Article]:
        """
        List articles newest first, optionally filtered.

        Args:
            category: Case-insensitive exact match on the article category
            search: Case-insensitive substring of title, excerpt or content

        Returns:
            Every matching article whose author resolves
        """
        with self._store.transaction():
            raw_articles = self.articles.get_all()

            if category:
                wanted = category.lower()
                raw_articles = [a for a in raw_articles if a.category.lower() == wanted]

            if search:
                term = search.lower()
                raw_articles = [
                    a for a in raw_articles
                    if term in a.title.lower()
                    or term in a.excerpt.lower()
                    or term in a.content.lower()
                ]

            result = self._resolve_sorted(raw_articles)

        logger.debug(f"Listed {len(result)} articles (category={category!r}, search={search!r})")
        return result

    def list_featured_articles(self) -> list[Article]:
        """List featured articles newest first."""
        with self._store.transaction():
            featured = [a for a in self.articles.get_all() if a.featured]
            return self._resolve_sorted(featured)

    def get_comments(self, article_id: int) -> list[CommentWithUser]:
        """Get an article's comments newest first. Empty for unknown articles."""
        with self._store.transaction():
            return self._resolve_comments(article_id, self._now())

    # ─────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────

    def create_comment(self, article_id: int, user_id: int, content: str) -> Comment | None:
        """
        Post a comment on an article.

        Returns:
            The new comment, or None if the article does not exist or its
            author does not resolve
        """
        with self._store.transaction():
            if self.get_article(article_id) is None:
                logger.info(f"Comment rejected: article {article_id} not found")
                return None
            comment = self.comments.add(
                article_id=article_id,
                user_id=user_id,
                content=content,
                created_at=self._now(),
            )

        logger.info(f"Comment {comment.id} created on article {article_id} by user {user_id}")
        return comment

    def like_comment(self, comment_id: int, user_id: int | None = None) -> Comment | None:
        """
        Like a comment.

        Without a user the counter always goes up by one. With a user the
        like is recorded once per user and repeats are no-ops.

        Returns:
            The updated comment, or None if the comment or the user does
            not exist
        """
        with self._store.transaction():
            if user_id is not None and self.users.get(user_id) is None:
                logger.info(f"Like rejected: user {user_id} not found")
                return None
            comment = self.comments.increment_likes(comment_id, user_id)
        if comment is not None:
            logger.info(f"Comment {comment_id} liked (user={user_id}, likes={comment.likes})")
        return comment

    # ─────────────────────────────────────────────────────────────
    # Resolution
    # ─────────────────────────────────────────────────────────────

    def _resolve_sorted(self, raw_articles: list[RawArticle]) -> list[Article]:
        # sorted() is stable, so articles published at the same moment keep insertion order
        ordered = sorted(raw_articles, key=lambda a: a.published_date, reverse=True)
        now = self._now()
        resolved = (self._resolve(a, now) for a in ordered)
        return [a for a in resolved if a is not None]

    def _resolve(self, raw: RawArticle, now: datetime) -> Article | None:
        author = self._resolve_author(raw.author_id)
        if author is None:
            logger.debug(f"Article {raw.id} skipped: author {raw.author_id} does not resolve")
            return None
        return to_article(raw, author, self._resolve_comments(raw.id, now))

    def _resolve_author(self, author_id: int) -> AuthorInfo | None:
        author = self.authors.get(author_id)
        if author is None:
            return None
        user = self.users.get(author.user_id)
        if user is None:
            return None
        return to_author_info(author, user)

    def _resolve_comments(self, article_id: int, now: datetime) -> list[CommentWithUser]:
        comments = sorted(
            self.comments.get_for_article(article_id),
            key=lambda c: c.created_at,
            reverse=True,
        )
        resolved = []
        for comment in comments:
            user = self.users.get(comment.user_id)
            if user is None:
                continue
            resolved.append(to_comment_with_user(comment, user, now))
        return resolved
