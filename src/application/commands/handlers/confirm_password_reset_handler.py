"""Confirm password reset handler.

Flow:
1. Find PASSWORD_RESET token by value
2. Reject missing, inactive or expired tokens (one generic message)
3. Reject tokens whose owner is gone or inactive
4. Conditionally deactivate the reset token (affected-row check)
5. Hash and store the new password
6. Revoke every active refresh token of the user
7. Commit, return Success(None)

All steps share one transaction: the password never changes without the
token being consumed and the sessions revoked.
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import ConfirmPasswordReset
from src.application.errors import ApplicationError, execution_failed, unauthorized
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
)


def _invalid_reset_token() -> ApplicationError:
    return unauthorized(AuthErrorMessage.INVALID_OR_EXPIRED_TOKEN, ErrorCode.TOKEN_INVALID)


class ConfirmPasswordResetHandler:
    """Handler for password reset confirmation."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._password_service = password_service
        self._logger = logger

    async def handle(
        self, cmd: ConfirmPasswordReset
    ) -> Result[None, ApplicationError]:
        """Handle password reset confirmation.

        Returns:
            Success(None) once the password is changed.
            Failure(ApplicationError) with UNAUTHORIZED for any unusable token.
        """
        try:
            async with self._uow as uow:
                now = datetime.now(UTC)
                token = await uow.tokens.find_by_token(
                    cmd.token, TokenType.PASSWORD_RESET
                )
                if token is None or not token.is_usable(now):
                    self._logger.warning("Password reset rejected: token unusable")
                    return Failure(error=_invalid_reset_token())

                user = await uow.users.find_by_id(token.user_id)
                if user is None or not user.is_active:
                    self._logger.warning(
                        "Password reset rejected: user inactive or missing",
                        user_id=str(token.user_id),
                    )
                    return Failure(error=_invalid_reset_token())

                if not await uow.tokens.deactivate(token.id, now):
                    await uow.rollback()
                    self._logger.warning(
                        "Password reset rejected: token already consumed",
                        user_id=str(user.id),
                    )
                    return Failure(error=_invalid_reset_token())

                user.change_password_hash(
                    self._password_service.hash_password(cmd.new_password), now
                )
                await uow.users.update(user)
                revoked = await uow.tokens.deactivate_all_for_user(
                    user.id, TokenType.REFRESH_TOKEN, now
                )
                await uow.commit()
        except Exception as e:
            self._logger.error("Password reset failed", error=e)
            return Failure(error=execution_failed("Password reset failed"))

        self._logger.info(
            "Password reset completed",
            user_id=str(user.id),
            revoked_sessions=revoked,
        )
        return Success(value=None)
