"""
Comment repository - storage operations for comments and likes.
"""

from dataclasses import replace
from datetime import datetime

from .models import Comment
from .store import MemoryStore


class CommentRepository:
    """Repository for comment operations."""

    def __init__(self, store: MemoryStore):
        self._store = store

    def add(
        self,
        article_id: int,
        user_id: int,
        content: str,
        created_at: datetime,
        likes: int = 0,
    ) -> Comment:
        """Add a new comment. Returns the stored comment."""
        with self._store.transaction() as store:
            comment_id = store.next_id("comments")
            comment = Comment(
                id=comment_id,
                content=content,
                article_id=article_id,
                user_id=user_id,
                created_at=created_at,
                likes=max(0, likes),
            )
            store.comments[comment_id] = comment
            return replace(comment)

    def get(self, comment_id: int) -> Comment | None:
        """Get single comment by ID."""
        comment = self._store.comments.get(comment_id)
        return replace(comment) if comment else None

    def get_for_article(self, article_id: int) -> list[Comment]:
        """Get all comments on an article in insertion order."""
        with self._store.transaction() as store:
            return [replace(c) for c in store.comments.values() if c.article_id == article_id]

    def increment_likes(self, comment_id: int, user_id: int | None = None) -> Comment | None:
        """
        Add one like to a comment.

        Anonymous likes always count. A like attributed to a user counts once
        per (comment, user) pair; repeats leave the counter unchanged.

        Returns:
            The updated comment, or None if the comment does not exist
        """
        with self._store.transaction() as store:
            comment = store.comments.get(comment_id)
            if comment is None:
                return None

            if user_id is not None:
                key = (comment_id, user_id)
                if key in store.likes:
                    return replace(comment)
                store.likes.add(key)

            comment.likes += 1
            return replace(comment)
