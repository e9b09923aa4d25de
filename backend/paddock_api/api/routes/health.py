"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - GET /health/ready returns 503 until every paddock table exists (migrations applied)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from paddock_api.db.base import Base
from paddock_api.infrastructure import database
import paddock_api.models  # noqa: F401

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


def _not_ready(reason: str, **details) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, **details},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "paddock-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — database connectivity, then the users/paddocks/steps/systems tables."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return _not_ready("database_unavailable")

    missing = await manager.missing_tables(sorted(Base.metadata.tables))
    if missing:
        logger.warning(f"Readiness: missing tables {missing}")
        return _not_ready("schema_missing", missing_tables=missing)
    return {
        "status": "ready",
        "checks": {"database": "healthy", "schema": "migrated"},
    }
