"""Verify access token query handler.

Flow:
1. Validate JWT signature and expiry (stateless)
2. Parse the subject claim
3. Load the user and require it to exist and be active
4. Return Success(AccessTokenInfo)

Also used by the presentation layer to authenticate requests, so a token
of a deactivated user stops working immediately even though the JWT
itself is still valid.
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.dtos.auth_dtos import AccessTokenInfo
from src.application.errors import ApplicationError, execution_failed, unauthorized
from src.application.queries.auth_queries import VerifyAccessToken
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    TokenGenerationProtocol,
    UnitOfWorkProtocol,
)


def _invalid_access_token() -> ApplicationError:
    return unauthorized(AuthErrorMessage.INVALID_ACCESS_TOKEN, ErrorCode.TOKEN_INVALID)


class VerifyAccessTokenHandler:
    """Handler for access token verification."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._token_service = token_service
        self._logger = logger

    async def handle(
        self, query: VerifyAccessToken
    ) -> Result[AccessTokenInfo, ApplicationError]:
        result = self._token_service.validate_access_token(query.access_token)
        if isinstance(result, Failure):
            return Failure(error=_invalid_access_token())
        claims = result.value

        try:
            user_id = UUID(str(claims["sub"]))
        except ValueError:
            return Failure(error=_invalid_access_token())

        try:
            async with self._uow as uow:
                user = await uow.users.find_by_id(user_id)
        except Exception as e:
            self._logger.error("Access token subject lookup failed", error=e)
            return Failure(error=execution_failed("Could not verify access token"))

        if user is None or not user.is_active:
            self._logger.warning(
                "Access token rejected: user inactive or missing",
                user_id=str(user_id),
            )
            return Failure(error=_invalid_access_token())

        return Success(
            value=AccessTokenInfo(
                user_id=user.id,
                email=user.email,
                role=user.role,
                is_valid=True,
                expires_at=datetime.fromtimestamp(int(claims["exp"]), tz=UTC),
            )
        )
