"""
HTTP exception utilities for common error patterns.

Provides helper functions to reduce boilerplate for 404s and maps request
validation failures to 400 responses.
"""

import logging
from typing import TypeVar

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

T = TypeVar("T")

logger = logging.getLogger(__name__)


def require_resource(resource: T | None, detail: str = "Resource not found") -> T:
    """
    Raise 404 if resource is None, otherwise return the resource.

    Usage:
        article = require_resource(catalog.get_article(id), "Article not found")
    """
    if resource is None:
        logger.warning(detail)
        raise HTTPException(status_code=404, detail=detail)
    return resource


def require_article(article: T | None) -> T:
    """Raise 404 if article is None."""
    return require_resource(article, "Article not found")


def require_comment(comment: T | None) -> T:
    """Raise 404 if comment is None."""
    return require_resource(comment, "Comment not found")


def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed ids and bodies with 400 instead of FastAPI's 422."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": f"Invalid request for {request.method} {request.url.path}",
            "errors": jsonable_encoder(exc.errors()),
        },
    )
