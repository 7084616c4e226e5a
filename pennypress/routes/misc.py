"""
Miscellaneous routes: health check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from .. import __version__
from ..catalog import ArticleCatalog
from ..config import get_catalog
from ..schemas import StatusResponse

router = APIRouter(prefix="/api", tags=["misc"])


@router.get("/status")
async def health_check(
    catalog: Annotated[ArticleCatalog, Depends(get_catalog)]
) -> StatusResponse:
    """API health check."""
    return StatusResponse(
        status="ok",
        version=__version__,
        articles=catalog.article_count(),
    )
