"""Tokens resource router.

Endpoints:
    POST /api/v1/tokens              - Create tokens (refresh with rotation)
    POST /api/v1/token-verifications - Verify an access token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.queries.auth_queries import VerifyAccessToken
from src.application.queries.handlers.verify_access_token_handler import (
    VerifyAccessTokenHandler,
)
from src.core.container import get_refresh_token_handler, get_verify_access_token_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    AuthTokensResponse,
    TokenCreateRequest,
    TokenVerificationRequest,
    TokenVerificationResponse,
)

router = APIRouter(tags=["Tokens"])


@router.post(
    "/tokens",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthTokensResponse,
    responses={
        401: {"description": "Refresh token invalid, expired or revoked", "model": ProblemDetails},
    },
    summary="Create tokens",
    description="Refresh access token using refresh token. The refresh token is rotated.",
)
async def create_tokens(
    request: Request,
    data: TokenCreateRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_token_handler),
) -> AuthTokensResponse | JSONResponse:
    """Create new tokens (refresh).

    POST /api/v1/tokens → 201 Created

    The presented refresh token is deactivated. Of two concurrent requests
    with the same token only one succeeds.
    """
    result = await handler.handle(RefreshAccessToken(refresh_token=data.refresh_token))

    match result:
        case Success(value=auth):
            return AuthTokensResponse.from_result(auth)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "/token-verifications",
    response_model=TokenVerificationResponse,
    responses={401: {"description": "Access token invalid", "model": ProblemDetails}},
    summary="Verify access token",
)
async def create_token_verification(
    request: Request,
    data: TokenVerificationRequest,
    handler: VerifyAccessTokenHandler = Depends(get_verify_access_token_handler),
) -> TokenVerificationResponse | JSONResponse:
    result = await handler.handle(VerifyAccessToken(access_token=data.access_token))

    match result:
        case Success(value=info):
            return TokenVerificationResponse(
                user_id=info.user_id,
                email=info.email,
                role=info.role.value,
                is_valid=info.is_valid,
                expires_at=info.expires_at,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id()
            )
