from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from slowapi.middleware import SlowAPIMiddleware

from cartpilot.core.config import Settings, get_settings
from cartpilot.core.errors import InvalidPostcode, LookupFailed
from cartpilot.core.logging import configure_logging
from cartpilot.db.seed import PRODUCT_CATALOG, UK_SUPERMARKETS
from cartpilot.middleware import (
    RateLimitExceeded,
    SecurityHeadersMiddleware,
    _rate_limit_exceeded_handler,
    get_limiter,
)
from cartpilot.routes import basket, health, postcodes, products, stores
from cartpilot.services.cache import KeyValueStore, MemoryKeyValueStore, RedisKeyValueStore
from cartpilot.services.postcodes import PostcodeService
from cartpilot.services.search import ProductCatalog
from cartpilot.services.stores import StoreDirectory

logger = logging.getLogger(__name__)


def build_kv_store(settings: Settings) -> KeyValueStore:
    if settings.basket_backend == "redis":
        return RedisKeyValueStore.from_url(settings.redis_url)
    return MemoryKeyValueStore()


def _cors_origins(settings: Settings) -> list[str]:
    if settings.environment == "development":
        return [
            "http://localhost:5173",  # Vite dev server
            "http://localhost:5174",
            "http://localhost:3000",
            "http://127.0.0.1:5173",
            "http://127.0.0.1:5174",
            "http://127.0.0.1:3000",
        ]
    origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
    if "*" in origins:
        logger.error("SECURITY ERROR: Cannot use wildcard CORS origins with credentials in production!")
        raise ValueError("Invalid CORS configuration: wildcard origins with credentials not allowed")
    return origins


def create_app(
    settings: Optional[Settings] = None,
    *,
    kv_store: Optional[KeyValueStore] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Build the application with its services.

    ``kv_store`` and ``http_client`` may be injected; otherwise they are built from
    settings, and a client created here is closed on shutdown.
    """
    settings = settings or get_settings()

    owned_client = None
    if http_client is None:
        owned_client = http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            if owned_client is not None:
                await owned_client.aclose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.state.settings = settings
    app.state.store_directory = StoreDirectory(UK_SUPERMARKETS)
    app.state.product_catalog = ProductCatalog(PRODUCT_CATALOG)
    app.state.kv_store = kv_store if kv_store is not None else build_kv_store(settings)
    app.state.postcode_service = PostcodeService(http_client, settings.postcode_api_base)

    # Rate limiting
    app.state.limiter = get_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.include_router(health.router)
    app.include_router(postcodes.router)
    app.include_router(stores.router)
    app.include_router(products.router)
    app.include_router(basket.router)

    app.add_middleware(SecurityHeadersMiddleware, environment=settings.environment)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request.state.request_id = request.headers.get("x-request-id", datetime.now(timezone.utc).isoformat())
        response = await call_next(request)
        response.headers["x-request-id"] = request.state.request_id
        return response

    @app.exception_handler(InvalidPostcode)
    async def invalid_postcode_handler(_: Request, exc: InvalidPostcode) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(LookupFailed)
    async def lookup_failed_handler(_: Request, exc: LookupFailed) -> JSONResponse:
        logger.warning("%s", exc)
        return JSONResponse(
            status_code=404,
            content={"detail": f"Could not find postcode {exc.postcode}", "reason": exc.reason},
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(_: Request, exc: ValidationError) -> JSONResponse:
        """Handle Pydantic validation errors and return 422 with details."""
        return JSONResponse(
            status_code=422,
            content={"detail": exc.errors(include_url=False, include_context=False)},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


configure_logging()
app = create_app()


__all__ = ["app", "create_app", "build_kv_store"]
