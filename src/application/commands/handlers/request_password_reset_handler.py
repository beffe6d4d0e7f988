"""Request password reset handler.

Flow:
1. Find user by normalized email
2. Unknown or inactive user: stop (still Success)
3. Deactivate previous PASSWORD_RESET tokens
4. Issue a new PASSWORD_RESET token (1h), commit
5. Send reset email (best-effort, after commit)
6. Return Success(None)

The result never reveals whether the email belongs to an account.
Storage failures roll back and return COMMAND_EXECUTION_FAILED.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.errors import ApplicationError, execution_failed
from src.core.result import Failure, Result, Success
from src.domain.entities.token import Token
from src.domain.entities.user import User
from src.domain.enums import TokenType
from src.domain.protocols import EmailProtocol, LoggerProtocol, UnitOfWorkProtocol
from src.domain.validators import normalize_email

if TYPE_CHECKING:
    from src.infrastructure.security.token_issuer import TokenIssuer


class RequestPasswordResetHandler:
    """Handler for password reset requests."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        token_issuer: TokenIssuer,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._token_issuer = token_issuer
        self._email_service = email_service
        self._logger = logger

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[None, ApplicationError]:
        """Handle password reset request.

        Returns:
            Success(None) for known and unknown emails alike.
            Failure(COMMAND_EXECUTION_FAILED) if the token could not be stored.
        """
        email = normalize_email(cmd.email)

        try:
            async with self._uow as uow:
                user = await uow.users.find_by_email(email)
                if user is None or not user.is_active:
                    self._logger.info("Password reset requested for unknown account")
                    return Success(value=None)

                now = datetime.now(UTC)
                await uow.tokens.deactivate_all_for_user(
                    user.id, TokenType.PASSWORD_RESET, now
                )
                reset_token = self._token_issuer.new_token(
                    user.id, TokenType.PASSWORD_RESET, now
                )
                await uow.tokens.save(reset_token)
                await uow.commit()
        except Exception as e:
            self._logger.error("Password reset request failed", error=e)
            return Failure(error=execution_failed("Password reset request failed"))

        self._logger.info("Password reset token issued", user_id=str(user.id))
        await self._send_reset_email(user, reset_token)
        return Success(value=None)

    async def _send_reset_email(self, user: User, token: Token) -> None:
        try:
            await self._email_service.send_password_reset_email(
                to_email=user.email,
                full_name=user.full_name,
                token=token.token,
            )
        except Exception as e:
            self._logger.error(
                "Password reset email failed", error=e, user_id=str(user.id)
            )
