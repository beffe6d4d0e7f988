"""Email verification handler.

Flow:
1. Find EMAIL_VERIFICATION token by value
2. Reject missing, inactive or expired tokens (one generic message)
3. Reject when the owner is gone, inactive, or already verified
4. Mark the user verified
5. Conditionally consume the token (affected-row check)
6. Issue access token and refresh token, save refresh token
7. Enforce session limit (savepoint)
8. Commit, then send welcome email (best-effort)
9. Return Success(AuthResult)

Verification doubles as the first login, so the client is authenticated
as soon as the link is used.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.application.commands.auth_commands import VerifyEmail
from src.application.dtos.auth_dtos import AuthResult, UserView
from src.application.errors import ApplicationError, execution_failed, unauthorized
from src.core.config import AuthConfig
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import TokenType
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import EmailProtocol, LoggerProtocol, UnitOfWorkProtocol

if TYPE_CHECKING:
    from src.application.services.session_limiter import SessionLimiter
    from src.infrastructure.security.token_issuer import TokenIssuer


def _invalid_verification_token() -> ApplicationError:
    return unauthorized(AuthErrorMessage.INVALID_OR_EXPIRED_TOKEN, ErrorCode.TOKEN_INVALID)


class VerifyEmailHandler:
    """Handler for email verification command."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        token_issuer: TokenIssuer,
        session_limiter: SessionLimiter,
        email_service: EmailProtocol,
        config: AuthConfig,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._token_issuer = token_issuer
        self._session_limiter = session_limiter
        self._email_service = email_service
        self._config = config
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[AuthResult, ApplicationError]:
        """Handle email verification command.

        Returns:
            Success(AuthResult) with fresh tokens for the verified user.
            Failure(ApplicationError) with UNAUTHORIZED for an unusable token
            or an already verified user.
        """
        try:
            async with self._uow as uow:
                now = datetime.now(UTC)
                token = await uow.tokens.find_by_token(
                    cmd.token, TokenType.EMAIL_VERIFICATION
                )
                if token is None or not token.is_usable(now):
                    self._logger.warning("Email verification rejected: token unusable")
                    return Failure(error=_invalid_verification_token())

                user = await uow.users.find_by_id(token.user_id)
                if user is None or not user.is_active:
                    self._logger.warning(
                        "Email verification rejected: user inactive or missing",
                        user_id=str(token.user_id),
                    )
                    return Failure(error=_invalid_verification_token())

                if user.is_email_verified:
                    self._logger.warning(
                        "Email verification rejected: already verified",
                        user_id=str(user.id),
                    )
                    return Failure(
                        error=unauthorized(
                            AuthErrorMessage.EMAIL_ALREADY_VERIFIED,
                            ErrorCode.EMAIL_ALREADY_VERIFIED,
                        )
                    )

                if not await uow.tokens.deactivate(token.id, now):
                    await uow.rollback()
                    self._logger.warning(
                        "Email verification rejected: token already consumed",
                        user_id=str(user.id),
                    )
                    return Failure(error=_invalid_verification_token())

                user.mark_email_verified(now)
                await uow.users.update(user)

                issued = self._token_issuer.issue_pair(user, now)
                await uow.tokens.save(issued.refresh_token)
                await self._session_limiter.limit_concurrent_sessions(
                    uow, user.id, self._config.max_sessions
                )
                await uow.commit()
        except Exception as e:
            self._logger.error("Email verification failed", error=e)
            return Failure(error=execution_failed("Email verification failed"))

        self._logger.info("Email verified", user_id=str(user.id))
        await self._send_welcome_email(user)

        return Success(
            value=AuthResult(
                user=UserView.from_user(user),
                access_token=issued.access_token,
                refresh_token=issued.refresh_token.token,
                expires_in=issued.expires_in,
            )
        )

    async def _send_welcome_email(self, user: User) -> None:
        try:
            await self._email_service.send_welcome_email(
                to_email=user.email,
                full_name=user.full_name,
            )
        except Exception as e:
            self._logger.error("Welcome email failed", error=e, user_id=str(user.id))
