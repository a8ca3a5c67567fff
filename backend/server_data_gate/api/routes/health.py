"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 200 once settings load (no external dependencies)
"""

import logging
from fastapi import APIRouter, status

from server_data_gate.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe. The gate is pure, so only configuration is checked."""
    get_settings()
    logger.debug("Readiness check passed")
    return {"status": "ready", "checks": {"config": "loaded"}}
