"""
Catalog models - dataclasses for stored entities and assembled views.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    id: int
    username: str
    password: str  # Plaintext, as in the mock data; never serialized
    name: str
    email: str
    avatar_url: str | None = None
    bio: str | None = None


@dataclass
class Author:
    id: int
    user_id: int
    description: str | None = None
    followers: int = 0


@dataclass
class RawArticle:
    id: int
    title: str
    excerpt: str
    content: str  # HTML
    image_url: str
    published_date: datetime
    author_id: int
    category: str
    price: str  # Decimal string, e.g. "0.10"
    read_time: int  # Minutes
    featured: bool = False
    publication: str | None = None


@dataclass
class Comment:
    id: int
    content: str
    article_id: int
    user_id: int
    created_at: datetime
    likes: int = 0


# ─────────────────────────────────────────────────────────────
# Views (denormalized, returned to callers)
# ─────────────────────────────────────────────────────────────

@dataclass
class AuthorInfo:
    id: int
    name: str
    avatar_url: str
    bio: str
    description: str


@dataclass
class CommentUser:
    id: int
    name: str
    avatar_url: str


@dataclass
class CommentWithUser:
    id: int
    content: str
    user: CommentUser
    time_ago: str
    likes: int


@dataclass
class Article:
    """Article joined with its author and comments."""
    id: int
    title: str
    excerpt: str
    content: str
    image_url: str
    published_date: datetime
    author: AuthorInfo
    category: str
    price: float
    read_time: int
    featured: bool
    comments: list[CommentWithUser] = field(default_factory=list)
    publication: str | None = None
