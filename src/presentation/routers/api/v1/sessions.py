"""Sessions resource router.

A session is an active refresh token.

Endpoints:
    POST   /api/v1/sessions - Create session (login)
    DELETE /api/v1/sessions - Delete every session of the user (logout)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginUser, LogoutUser
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.core.container import get_login_user_handler, get_logout_user_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    AuthTokensResponse,
    SessionCreateRequest,
    SessionDeleteResponse,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthTokensResponse,
    responses={
        401: {
            "description": "Invalid credentials or email not verified",
            "model": ProblemDetails,
        },
    },
    summary="Create session",
    description="Log in with email and password. Requires a verified email.",
)
async def create_session(
    request: Request,
    data: SessionCreateRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> AuthTokensResponse | JSONResponse:
    """Create a new session (login).

    POST /api/v1/sessions → 201 Created

    Returns:
        AuthTokensResponse on success (201 Created).
        JSONResponse with error on failure (401).
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Success(value=auth):
            return AuthTokensResponse.from_result(auth)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.delete(
    "",
    response_model=SessionDeleteResponse,
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
    summary="Delete sessions",
    description="Log out: revoke every active refresh token of the user.",
)
async def delete_sessions(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> SessionDeleteResponse | JSONResponse:
    result = await handler.handle(LogoutUser(user_id=current_user.user_id))

    match result:
        case Success(value=logout):
            return SessionDeleteResponse(revoked_count=logout.revoked_count)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )
