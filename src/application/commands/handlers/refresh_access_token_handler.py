"""Refresh access token handler (refresh token rotation).

Flow:
1. Find REFRESH_TOKEN row by value
2. Reject missing, inactive or expired tokens
3. Reject tokens whose owner is gone or inactive
4. Conditionally deactivate the presented token (affected-row check)
5. Issue a new access token and a replacement refresh token
6. Save replacement, commit, return Success(AuthResult)

Step 4 arbitrates concurrent refreshes of the same token: only the caller
whose UPDATE flips ``is_active`` proceeds, every other caller is rejected
and its transaction rolled back.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos.auth_dtos import AuthResult, UserView
from src.application.errors import ApplicationError, execution_failed, unauthorized
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import LoggerProtocol, UnitOfWorkProtocol

if TYPE_CHECKING:
    from src.infrastructure.security.token_issuer import TokenIssuer


def _invalid_refresh_token() -> ApplicationError:
    return unauthorized(AuthErrorMessage.INVALID_REFRESH_TOKEN, ErrorCode.TOKEN_INVALID)


class RefreshAccessTokenHandler:
    """Handler for refresh token rotation."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        token_issuer: TokenIssuer,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._token_issuer = token_issuer
        self._logger = logger

    async def handle(
        self, cmd: RefreshAccessToken
    ) -> Result[AuthResult, ApplicationError]:
        """Handle refresh access token command.

        Returns:
            Success(AuthResult) with a new access token and a new refresh token.
            Failure(ApplicationError) with UNAUTHORIZED if the refresh token is
            unusable or was consumed concurrently.
        """
        try:
            async with self._uow as uow:
                now = datetime.now(UTC)
                token = await uow.tokens.find_by_token(
                    cmd.refresh_token, TokenType.REFRESH_TOKEN
                )
                if token is None or not token.is_usable(now):
                    self._logger.warning("Refresh rejected: token unusable")
                    return Failure(error=_invalid_refresh_token())

                user = await uow.users.find_by_id(token.user_id)
                if user is None or not user.is_active:
                    self._logger.warning(
                        "Refresh rejected: user inactive or missing",
                        user_id=str(token.user_id),
                    )
                    return Failure(error=_invalid_refresh_token())

                if not await uow.tokens.deactivate(token.id, now):
                    await uow.rollback()
                    self._logger.warning(
                        "Refresh rejected: token already consumed",
                        user_id=str(user.id),
                        token_id=str(token.id),
                    )
                    return Failure(error=_invalid_refresh_token())

                issued = self._token_issuer.issue_pair(user, now)
                await uow.tokens.save(issued.refresh_token)
                await uow.commit()
        except Exception as e:
            self._logger.error("Token refresh failed", error=e)
            return Failure(error=execution_failed("Token refresh failed"))

        self._logger.info("Refresh token rotated", user_id=str(user.id))
        return Success(
            value=AuthResult(
                user=UserView.from_user(user),
                access_token=issued.access_token,
                refresh_token=issued.refresh_token.token,
                expires_in=issued.expires_in,
            )
        )
