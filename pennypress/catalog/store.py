"""
In-memory store - entity maps, id counters and the store lock.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

from .models import Author, Comment, RawArticle, User


class MemoryStore:
    """Holds every catalog record for the lifetime of the process."""

    KINDS = ("users", "authors", "articles", "comments")

    def __init__(self):
        self.users: dict[int, User] = {}
        self.authors: dict[int, Author] = {}
        self.articles: dict[int, RawArticle] = {}
        self.comments: dict[int, Comment] = {}
        # (comment_id, user_id) pairs for attributed likes
        self.likes: set[tuple[int, int]] = set()

        self._counters = {kind: 0 for kind in self.KINDS}
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["MemoryStore"]:
        """Hold the store lock for the duration of one operation."""
        with self._lock:
            yield self

    def next_id(self, kind: str) -> int:
        """Return the next id for an entity kind. Ids start at 1."""
        if kind not in self._counters:
            raise ValueError(f"Unknown entity kind: {kind}")
        with self._lock:
            self._counters[kind] += 1
            return self._counters[kind]
