"""
Comment routes: likes.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends

from ..catalog import ArticleCatalog
from ..config import get_catalog
from ..exceptions import require_comment, require_resource
from ..schemas import CommentLikeRequest, CommentResponse

router = APIRouter(
    prefix="/api/comments",
    tags=["comments"],
)


@router.post("/{comment_id}/like")
async def like_comment(
    comment_id: int,
    catalog: Annotated[ArticleCatalog, Depends(get_catalog)],
    request: Annotated[CommentLikeRequest | None, Body()] = None,
) -> CommentResponse:
    """Like a comment.

    The body is optional. Without a userId every call adds a like; with one,
    each user's like is counted once.
    """
    user_id = request.user_id if request else None
    if user_id is not None:
        require_resource(catalog.get_user(user_id), "User not found")
    comment = require_comment(catalog.like_comment(comment_id, user_id))
    return CommentResponse.from_catalog(comment)
