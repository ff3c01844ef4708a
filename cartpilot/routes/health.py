from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from cartpilot.routes.deps import get_key_value_store
from cartpilot.services.cache import KeyValueStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthcheck() -> dict[str, str]:
    """
    Basic liveness probe - returns OK if the application is running.
    """
    return {"status": "ok"}


@router.get("/health")
def health(kv_store: KeyValueStore = Depends(get_key_value_store)) -> JSONResponse:
    """
    Checks the basket storage backend.
    Returns 200 if it answers, 503 otherwise.
    """
    health_status: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {},
    }

    try:
        kv_store.ping()
        health_status["checks"]["basket_storage"] = {
            "status": "healthy",
            "message": "Basket storage reachable",
        }
    except Exception as e:
        logger.error(f"Basket storage health check failed: {e}")
        health_status["checks"]["basket_storage"] = {
            "status": "unhealthy",
            "message": f"Basket storage unreachable: {str(e)}",
        }
        health_status["status"] = "unhealthy"
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=health_status,
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
