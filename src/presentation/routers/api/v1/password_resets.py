"""Password reset resources.

Endpoints:
    POST /api/v1/password-reset-tokens - Request a reset email
    POST /api/v1/password-resets       - Reset the password with a token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    ConfirmPasswordReset,
    RequestPasswordReset,
)
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.core.container import (
    get_confirm_password_reset_handler,
    get_request_password_reset_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    MessageResponse,
    PasswordResetCreateRequest,
    PasswordResetTokenCreateRequest,
)

router = APIRouter(tags=["Password Reset"])

_RESET_REQUESTED = "If an account exists for this email, a reset link has been sent."


@router.post(
    "/password-reset-tokens",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=MessageResponse,
    summary="Request password reset",
    responses={500: {"description": "Request could not be stored", "model": ProblemDetails}},
    description="202 whether or not the email belongs to an account.",
)
async def create_password_reset_token(
    request: Request,
    data: PasswordResetTokenCreateRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> MessageResponse | JSONResponse:
    """Request a password reset email.

    POST /api/v1/password-reset-tokens → 202 Accepted
    """
    result = await handler.handle(RequestPasswordReset(email=data.email))

    match result:
        case Success():
            return MessageResponse(message=_RESET_REQUESTED)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "/password-resets",
    response_model=MessageResponse,
    responses={401: {"description": "Token invalid or expired", "model": ProblemDetails}},
    summary="Reset password",
    description="Set a new password. Every active session of the user is revoked.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: ConfirmPasswordResetHandler = Depends(get_confirm_password_reset_handler),
) -> MessageResponse | JSONResponse:
    result = await handler.handle(
        ConfirmPasswordReset(token=data.token, new_password=data.new_password)
    )

    match result:
        case Success():
            return MessageResponse(
                message="Password has been reset. Please log in with your new password."
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )
