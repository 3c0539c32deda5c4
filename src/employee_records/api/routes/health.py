"""Health check endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status

from employee_records.api.dependencies import StorageDep
from employee_records.api.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(storage: StorageDep) -> HealthResponse:
    """Check API and storage health."""
    employees = None
    try:
        employees = len(storage.list_employees())
    except Exception:
        logger.exception("Storage health check failed")

    return HealthResponse(
        status="healthy" if employees is not None else "degraded",
        timestamp=datetime.now(timezone.utc),
        storage=storage.backend,
        employees=employees,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check() -> dict[str, str]:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
