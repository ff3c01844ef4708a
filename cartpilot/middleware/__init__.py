"""Middleware for the CartPilot FastAPI application."""
from __future__ import annotations

from cartpilot.middleware.rate_limit import (
    RateLimitExceeded,
    _rate_limit_exceeded_handler,
    get_limiter,
)
from cartpilot.middleware.security import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
    "get_limiter",
    "RateLimitExceeded",
    "_rate_limit_exceeded_handler",
]
