"""
API route modules.
"""

from .articles import router as articles_router
from .comments import router as comments_router
from .misc import router as misc_router

__all__ = [
    "articles_router",
    "comments_router",
    "misc_router",
]
