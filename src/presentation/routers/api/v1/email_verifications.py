"""Email verification resources.

Endpoints:
    POST /api/v1/email-verifications - Verify email (logs the user in)
    POST /api/v1/verification-emails - Resend the verification email
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import ResendVerificationEmail, VerifyEmail
from src.application.commands.handlers.resend_verification_email_handler import (
    ResendVerificationEmailHandler,
)
from src.application.commands.handlers.verify_email_handler import VerifyEmailHandler
from src.core.container import (
    get_resend_verification_email_handler,
    get_verify_email_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    AuthTokensResponse,
    EmailVerificationCreateRequest,
    MessageResponse,
    VerificationEmailCreateRequest,
)

router = APIRouter(tags=["Email Verification"])


@router.post(
    "/email-verifications",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthTokensResponse,
    responses={
        401: {"description": "Token invalid, expired or already used", "model": ProblemDetails},
    },
    summary="Verify email",
    description="Consume a verification token. Returns a token pair.",
)
async def create_email_verification(
    request: Request,
    data: EmailVerificationCreateRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> AuthTokensResponse | JSONResponse:
    """Verify email address.

    POST /api/v1/email-verifications → 201 Created
    """
    result = await handler.handle(VerifyEmail(token=data.token))

    match result:
        case Success(value=auth):
            return AuthTokensResponse.from_result(auth)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "/verification-emails",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=MessageResponse,
    responses={
        401: {"description": "Email already verified", "model": ProblemDetails},
        404: {"description": "No such user", "model": ProblemDetails},
        502: {"description": "Email delivery failed", "model": ProblemDetails},
    },
    summary="Resend verification email",
)
async def create_verification_email(
    request: Request,
    data: VerificationEmailCreateRequest,
    handler: ResendVerificationEmailHandler = Depends(
        get_resend_verification_email_handler
    ),
) -> MessageResponse | JSONResponse:
    """Resend the verification email.

    POST /api/v1/verification-emails → 202 Accepted

    Earlier verification tokens of the user stop working.
    """
    result = await handler.handle(ResendVerificationEmail(email=data.email))

    match result:
        case Success():
            return MessageResponse(message="Verification email sent.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )
