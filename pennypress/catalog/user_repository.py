"""
Repository for user and author operations.
"""

from .models import Author, User
from .store import MemoryStore


class UserRepository:
    """Repository for user records."""

    def __init__(self, store: MemoryStore):
        self._store = store

    def add(
        self,
        username: str,
        password: str,
        name: str,
        email: str,
        avatar_url: str | None = None,
        bio: str | None = None,
    ) -> int:
        """Add a new user. Returns user ID."""
        with self._store.transaction() as store:
            user_id = store.next_id("users")
            store.users[user_id] = User(
                id=user_id,
                username=username,
                password=password,
                name=name,
                email=email,
                avatar_url=avatar_url,
                bio=bio,
            )
            return user_id

    def get(self, user_id: int) -> User | None:
        """Get user by ID."""
        return self._store.users.get(user_id)


class AuthorRepository:
    """Repository for author records. An author wraps an existing user."""

    def __init__(self, store: MemoryStore):
        self._store = store

    def add(self, user_id: int, description: str | None = None, followers: int = 0) -> int:
        """Add a new author. Returns author ID."""
        with self._store.transaction() as store:
            author_id = store.next_id("authors")
            store.authors[author_id] = Author(
                id=author_id,
                user_id=user_id,
                description=description,
                followers=max(0, followers),
            )
            return author_id

    def get(self, author_id: int) -> Author | None:
        """Get author by ID."""
        return self._store.authors.get(author_id)
