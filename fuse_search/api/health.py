"""Health check API endpoints."""

import time

from fastapi import APIRouter

from ..config import get_settings
from ..engine_instance import search_engine
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.

    Runs a known exact match through the engine to confirm the core works.
    """
    result = search_engine.search_text("health", "health")
    status = "healthy" if result is not None and result.score == 0.0 else "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
    )
