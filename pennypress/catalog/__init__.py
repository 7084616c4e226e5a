"""
Catalog module - in-memory storage for articles, authors, users and comments.

Uses repository pattern over a process-lifetime store so a real database can
replace the store without changing callers.
"""

from .store import MemoryStore
from .models import (
    Article,
    Author,
    AuthorInfo,
    Comment,
    CommentUser,
    CommentWithUser,
    RawArticle,
    User,
)
from .article_repository import ArticleRepository
from .comment_repository import CommentRepository
from .user_repository import AuthorRepository, UserRepository
from .catalog import ArticleCatalog

__all__ = [
    "ArticleCatalog",
    "MemoryStore",
    "Article",
    "Author",
    "AuthorInfo",
    "Comment",
    "CommentUser",
    "CommentWithUser",
    "RawArticle",
    "User",
    "ArticleRepository",
    "CommentRepository",
    "AuthorRepository",
    "UserRepository",
]
