"""Users resource router.

Endpoints:
    POST  /api/v1/users              - Create user (registration)
    GET   /api/v1/users/me           - Get the authenticated user
    PATCH /api/v1/users/me/password  - Change the authenticated user's password
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import ChangePassword, RegisterUser
from src.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from src.application.commands.handlers.register_user_handler import RegisterUserHandler
from src.application.queries.auth_queries import GetCurrentUser
from src.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from src.core.container import (
    get_change_password_handler,
    get_current_user_handler,
    get_register_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    MessageResponse,
    PasswordChangeRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserCreateResponse,
    responses={409: {"description": "Email or phone already registered", "model": ProblemDetails}},
    summary="Create user",
    description="Register a new account. A verification email is sent; no tokens are issued.",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> UserCreateResponse | JSONResponse:
    """Create a new user (registration).

    POST /api/v1/users → 201 Created

    Returns:
        UserCreateResponse on success (201 Created).
        JSONResponse with error on failure (409/500).
    """
    command = RegisterUser(
        full_name=data.full_name,
        email=data.email,
        password=data.password,
        phone_number=data.phone_number,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=registration):
            return UserCreateResponse(
                user=UserResponse.from_view(registration.user),
                requires_email_verification=registration.requires_email_verification,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
    summary="Get current user",
)
async def get_me(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetCurrentUserHandler = Depends(get_current_user_handler),
) -> UserResponse | JSONResponse:
    result = await handler.handle(GetCurrentUser(user_id=current_user.user_id))

    match result:
        case Success(value=user):
            return UserResponse.from_view(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.patch(
    "/me/password",
    response_model=MessageResponse,
    responses={401: {"description": "Current password incorrect", "model": ProblemDetails}},
    summary="Change password",
    description="Change password. Every active session of the user is revoked.",
)
async def change_password(
    request: Request,
    data: PasswordChangeRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ChangePasswordHandler = Depends(get_change_password_handler),
) -> MessageResponse | JSONResponse:
    """Change the authenticated user's password.

    PATCH /api/v1/users/me/password → 200 OK
    """
    command = ChangePassword(
        user_id=current_user.user_id,
        current_password=data.current_password,
        new_password=data.new_password,
    )

    result = await handler.handle(command)

    match result:
        case Success():
            return MessageResponse(message="Password changed successfully.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )
