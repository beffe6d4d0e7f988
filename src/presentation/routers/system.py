"""System router for non-versioned application endpoints.

Root and health endpoints for load balancers and basic diagnostics.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import get_settings
from src.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check."""
    settings = get_settings()
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check including database connectivity.

    Returns:
        200 with status "healthy", or 503 when the database is unreachable.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "unreachable"},
    )
