"""JWT authentication dependencies.

FastAPI dependencies that authenticate a request from its Bearer access
token. Verification goes through VerifyAccessTokenHandler, so a token whose
user has been deactivated is rejected even while the JWT is still valid.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": str(current_user.user_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.queries.auth_queries import VerifyAccessToken
from src.application.queries.handlers.verify_access_token_handler import (
    VerifyAccessTokenHandler,
)
from src.core.container import get_verify_access_token_handler
from src.core.result import Failure, Success
from src.domain.enums import UserRole

# auto_error=False: a missing token is reported as 401 by get_current_user
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user identity.

    Attributes:
        user_id: User's unique identifier (JWT 'sub' claim).
        email: User's email address.
        role: User's storefront role.
    """

    user_id: UUID
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    handler: Annotated[
        VerifyAccessTokenHandler, Depends(get_verify_access_token_handler)
    ],
) -> CurrentUser:
    """Get current authenticated user from the Bearer access token.

    Raises:
        HTTPException 401: If the token is missing, invalid, expired, or
            belongs to a missing or inactive user.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    result = await handler.handle(VerifyAccessToken(access_token=credentials.credentials))

    match result:
        case Success(value=info):
            return CurrentUser(user_id=info.user_id, email=info.email, role=info.role)
        case Failure(error=error):
            raise _unauthorized(error.message)


async def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Require the ADMIN role.

    Raises:
        HTTPException 403: If the authenticated user is not an admin.
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return current_user
