"""Token cleanup admin endpoint.

Endpoints:
    POST /api/v1/admin/token-cleanups - Run both cleanup sweeps now

Requires an authenticated user with the ADMIN role.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.errors import execution_failed
from src.core.container import get_logger, get_token_cleanup_scheduler
from src.infrastructure.jobs.token_cleanup_scheduler import TokenCleanupScheduler
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    require_admin,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import TokenCleanupResponse

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/token-cleanups",
    response_model=TokenCleanupResponse,
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
        403: {"description": "Admin role required", "model": ProblemDetails},
    },
    summary="Force token cleanup",
    description=(
        "Delete expired tokens and inactive tokens past the forced retention "
        "window, outside the regular schedule."
    ),
)
async def create_token_cleanup(
    request: Request,
    admin: CurrentUser = Depends(require_admin),
    scheduler: TokenCleanupScheduler = Depends(get_token_cleanup_scheduler),
) -> TokenCleanupResponse | JSONResponse:
    """Force a token cleanup.

    POST /api/v1/admin/token-cleanups → 200 OK
    """
    try:
        report = await scheduler.trigger_now()
    except Exception as e:
        get_logger().error(
            "Forced token cleanup failed", error=e, admin_id=str(admin.user_id)
        )
        return ErrorResponseBuilder.from_application_error(
            error=execution_failed("Token cleanup failed"),
            request=request,
            trace_id=get_trace_id(),
        )

    get_logger().info(
        "Forced token cleanup",
        admin_id=str(admin.user_id),
        expired=report.expired,
        inactive=report.inactive,
    )
    return TokenCleanupResponse(expired=report.expired, inactive=report.inactive)
