"""
Article routes: list, featured, detail and article comments.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..catalog import ArticleCatalog
from ..config import get_catalog
from ..exceptions import require_article
from ..schemas import (
    ArticleResponse,
    CommentCreateRequest,
    CommentResponse,
    CommentWithUserResponse,
)


router = APIRouter(
    prefix="/api/articles",
    tags=["articles"],
)


# ─────────────────────────────────────────────────────────────
# Lists (static paths first)
# ─────────────────────────────────────────────────────────────

@router.get("/featured")
async def list_featured_articles(
    catalog: Annotated[ArticleCatalog, Depends(get_catalog)]
) -> list[ArticleResponse]:
    """Get featured articles, newest first."""
    articles = catalog.list_featured_articles()
    return [ArticleResponse.from_catalog(a) for a in articles]


@router.get("")
async def list_articles(
    catalog: Annotated[ArticleCatalog, Depends(get_catalog)],
    category: str | None = None,
    search: str | None = None,
) -> list[ArticleResponse]:
    """Get articles, optionally filtered by category and/or search text.

    Args:
        category: Case-insensitive exact category name
        search: Case-insensitive text found in title, excerpt or content
    """
    articles = catalog.list_articles(category=category, search=search)
    return [ArticleResponse.from_catalog(a) for a in articles]


# ─────────────────────────────────────────────────────────────
# Single Article
# ─────────────────────────────────────────────────────────────

@router.get("/{article_id}")
async def get_article(
    article_id: int,
    catalog: Annotated[ArticleCatalog, Depends(get_catalog)]
) -> ArticleResponse:
    """Get a single article with its author and comments."""
    article = require_article(catalog.get_article(article_id))
    return ArticleResponse.from_catalog(article)


@router.get("/{article_id}/comments")
async def list_comments(
    article_id: int,
    catalog: Annotated[ArticleCatalog, Depends(get_catalog)]
) -> list[CommentWithUserResponse]:
    """Get an article's comments, newest first."""
    return [CommentWithUserResponse.from_catalog(c) for c in catalog.get_comments(article_id)]


@router.post("/{article_id}/comments", status_code=201)
async def create_comment(
    article_id: int,
    catalog: Annotated[ArticleCatalog, Depends(get_catalog)],
    body: Annotated[Any, Body()] = None,
) -> CommentResponse:
    """Post a comment on an article.

    The article is looked up before the body is validated, so a missing
    article is a 404 whatever the body holds.
    """
    require_article(catalog.get_article(article_id))

    try:
        request = CommentCreateRequest.model_validate(body)
    except ValidationError as e:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        raise RequestValidationError(errors, body=body) from e

    comment = require_article(
        catalog.create_comment(article_id, request.user_id, request.content)
    )
    return CommentResponse.from_catalog(comment)
