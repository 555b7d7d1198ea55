"""Health & Readiness Checks — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ answers 200 whenever the process is up; it never touches the database
    - GET /health/ready answers 503 until the session manager exists and SELECT 1 succeeds
    - Readiness names the SQL dialect so a SQLite-backed instance is visible to health checks
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import pharmadb.infrastructure.database as database
from pharmadb.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness: the mutation layer can open a transaction."""
    manager = database.db_manager
    if manager is None:
        reason = "database_not_initialized"
    elif not await manager.health_check():
        reason = "database_unavailable"
    else:
        return {
            "status": "ready",
            "checks": {"database": "healthy"},
            "dialect": manager.engine.dialect.name,
        }
    logger.warning(f"Readiness check failed: {reason}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
