"""
PennyPress API Server

FastAPI application providing endpoints for:
- Article listing (category and keyword filters, featured picks)
- Article detail with author info and comments
- Posting and liking comments
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .catalog import ArticleCatalog
from .config import config, state
from .exceptions import validation_exception_handler
from .rate_limit import setup_rate_limiting
from .routes import articles_router, comments_router, misc_router
from .seed import load_seed_file, seed_catalog

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL):
    """Send package logs to stderr at the configured level."""
    package_logger = logging.getLogger("pennypress")
    package_logger.setLevel(level.upper())
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        package_logger.addHandler(handler)


def build_catalog() -> ArticleCatalog:
    """Create the catalog and load seed data per configuration."""
    catalog = ArticleCatalog()
    if config.SEED_ON_STARTUP:
        data = load_seed_file(config.SEED_PATH) if config.SEED_PATH else None
        seed_catalog(catalog, data)
    else:
        logger.info("Seeding disabled; starting with an empty catalog")
    return catalog


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application resources."""
    # Startup - skip if already initialized (e.g., by tests)
    if state.catalog is None:
        state.catalog = build_catalog()
        logger.info(f"Catalog ready with {state.catalog.article_count()} articles")

    yield


configure_logging()

app = FastAPI(
    title="PennyPress API",
    version=__version__,
    lifespan=lifespan
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
setup_rate_limiting(app)

if config.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(misc_router)
app.include_router(articles_router)
app.include_router(comments_router)
