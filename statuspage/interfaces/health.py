"""
Health check router.

Liveness endpoint reporting the service version as JSON.
``/api/v1/health`` is the only path the catch-all status page route
does not answer.
"""

from fastapi import APIRouter

from statuspage.core.config import settings
from statuspage.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)
