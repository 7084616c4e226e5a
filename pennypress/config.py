"""
Configuration and application state management.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from fastapi import HTTPException

if TYPE_CHECKING:
    from .catalog import ArticleCatalog

# Load environment variables
load_dotenv()


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _parse_list(value: str | None) -> list[str]:
    """Parse a comma-separated environment variable into a list."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Application configuration from environment."""
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "5005"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Mock data loaded into the in-memory catalog at startup
    SEED_ON_STARTUP: bool = _parse_bool(os.getenv("SEED_ON_STARTUP"), default=True)
    # Optional JSON file replacing the bundled mock data
    SEED_PATH: Path | None = Path(os.environ["SEED_PATH"]) if os.getenv("SEED_PATH") else None

    # Requests per minute per client address; 0 disables limiting
    RATE_LIMIT_PER_MINUTE: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "0"))

    # Browser origins allowed to call the API (the frontend dev server, usually)
    CORS_ORIGINS: list[str] = _parse_list(os.getenv("CORS_ORIGINS"))


config = Config()


class AppState:
    """Shared application state."""
    catalog: "ArticleCatalog | None" = None


state = AppState()


def get_catalog() -> "ArticleCatalog":
    """Dependency to get the article catalog."""
    if state.catalog is None:
        raise HTTPException(status_code=500, detail="Catalog not initialized")
    return state.catalog
