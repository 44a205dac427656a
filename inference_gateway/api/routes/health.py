"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the request store cannot be read (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from inference_gateway.services.request_store import (
    InMemoryInferenceRequestStore,
    get_request_store,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "inference-gateway",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    store: InMemoryInferenceRequestStore = Depends(get_request_store),
):
    """Readiness check: includes request store access and queue depth."""
    try:
        queued = store.queued_count()
    except Exception as e:
        logger.error(f"Request store check failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "request_store_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"request_store": "healthy"},
        "queued": queued,
    }
