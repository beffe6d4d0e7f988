"""Login handler for User Authentication.

Flow:
1. Find user by normalized email
2. Reject unknown, inactive or wrong-password attempts with one message
3. Reject unverified accounts (distinct message, only after the password matched)
4. Issue JWT access token and opaque refresh token
5. Save refresh token
6. Enforce session limit inside a savepoint (failure logged, not propagated)
7. Commit and return Success(AuthResult)
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.application.commands.auth_commands import LoginUser
from src.application.dtos.auth_dtos import AuthResult, UserView
from src.application.errors import ApplicationError, execution_failed, unauthorized
from src.core.config import AuthConfig
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
)
from src.domain.validators import normalize_email

if TYPE_CHECKING:
    from src.application.services.session_limiter import SessionLimiter
    from src.infrastructure.security.token_issuer import TokenIssuer


class LoginUserHandler:
    """Handler for user login command."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        token_issuer: TokenIssuer,
        session_limiter: SessionLimiter,
        config: AuthConfig,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._session_limiter = session_limiter
        self._config = config
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthResult, ApplicationError]:
        """Handle user login command.

        Returns:
            Success(AuthResult) on successful login.
            Failure(ApplicationError) with UNAUTHORIZED for bad credentials
            or an unverified email.
        """
        email = normalize_email(cmd.email)

        try:
            async with self._uow as uow:
                user = await uow.users.find_by_email(email)

                if (
                    user is None
                    or not user.is_active
                    or not user.compare_password(cmd.password, self._password_service)
                ):
                    self._logger.warning("Login rejected: invalid credentials")
                    return Failure(
                        error=unauthorized(
                            AuthErrorMessage.INVALID_CREDENTIALS,
                            ErrorCode.INVALID_CREDENTIALS,
                        )
                    )

                # Active with a matching password: only verification can block
                if not user.can_login():
                    self._logger.warning(
                        "Login rejected: email not verified", user_id=str(user.id)
                    )
                    return Failure(
                        error=unauthorized(
                            AuthErrorMessage.EMAIL_NOT_VERIFIED,
                            ErrorCode.EMAIL_NOT_VERIFIED,
                        )
                    )

                now = datetime.now(UTC)
                issued = self._token_issuer.issue_pair(user, now)
                await uow.tokens.save(issued.refresh_token)
                await self._session_limiter.limit_concurrent_sessions(
                    uow, user.id, self._config.max_sessions
                )
                await uow.commit()
        except Exception as e:
            self._logger.error("Login failed", error=e)
            return Failure(error=execution_failed("Login failed"))

        self._logger.info("User logged in", user_id=str(user.id))
        return Success(
            value=AuthResult(
                user=UserView.from_user(user),
                access_token=issued.access_token,
                refresh_token=issued.refresh_token.token,
                expires_in=issued.expires_in,
            )
        )
