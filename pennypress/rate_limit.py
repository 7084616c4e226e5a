"""
Rate limiting middleware for API protection.

Uses slowapi to limit requests per client address. Disabled unless
RATE_LIMIT_PER_MINUTE is set to a positive number.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import config


def build_limiter(per_minute: int) -> Limiter:
    """Create a limiter allowing per_minute requests per address; 0 disables it."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[f"{per_minute}/minute"] if per_minute > 0 else [],
        storage_uri="memory://",  # In-memory storage (resets on restart)
        enabled=per_minute > 0,
    )


limiter = build_limiter(config.RATE_LIMIT_PER_MINUTE)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Custom handler for rate limit exceeded errors."""
    retry_after = getattr(exc, "retry_after", 60)
    return JSONResponse(
        status_code=429,
        content={
            "detail": f"Rate limit exceeded: {exc.detail}",
            "retry_after": retry_after,
        },
        headers={"Retry-After": str(retry_after)},
    )


def setup_rate_limiting(app: FastAPI, app_limiter: Limiter | None = None):
    """
    Configure rate limiting for a FastAPI app.

    Call this once while building the app. Uses the configured limiter
    unless another one is given.
    """
    app.state.limiter = app_limiter if app_limiter is not None else limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
