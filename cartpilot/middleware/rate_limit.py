"""Rate limiting for the FastAPI application."""
from __future__ import annotations

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from cartpilot.core.config import Settings


def get_limiter(settings: Settings) -> Limiter:
    """
    Create a per-IP rate limiter.

    Storage:
    - Development: In-memory (single instance)
    - Production with the Redis basket backend: Redis, shared across instances
    """
    if settings.environment == "production" and settings.basket_backend == "redis":
        storage_uri = str(settings.redis_url)
    else:
        storage_uri = "memory://"

    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        storage_uri=storage_uri,
    )


__all__ = ["get_limiter", "RateLimitExceeded", "_rate_limit_exceeded_handler"]
