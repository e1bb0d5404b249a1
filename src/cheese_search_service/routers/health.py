"""Health check endpoints."""

from fastapi import APIRouter, status

from cheese_search_service.config import settings
from cheese_search_service.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check endpoint",
    description=(
        "Returns service health status and version. No authentication "
        "required. This endpoint does NOT use the /api/v1 prefix."
    ),
)
async def health_check() -> HealthResponse:
    """Health check endpoint.

    The search core is pure computation with no connections to probe, so a
    responding process is a healthy one.
    """
    return HealthResponse(status="ok", version=settings.app_version)
