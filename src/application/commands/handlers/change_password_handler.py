"""Change password handler.

Flow:
1. Load the authenticated user (NOT_FOUND if missing or inactive)
2. Compare the current password (UNAUTHORIZED on mismatch)
3. Store the new password hash
4. Revoke every active refresh token of the user
5. Commit, return Success(None)
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import ChangePassword
from src.application.errors import (
    ApplicationError,
    execution_failed,
    unauthorized,
    user_not_found,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import AuthErrorMessage
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
)


class ChangePasswordHandler:
    """Handler for change password command."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: ChangePassword) -> Result[None, ApplicationError]:
        try:
            async with self._uow as uow:
                user = await uow.users.find_by_id(cmd.user_id)
                if user is None or not user.is_active:
                    return Failure(error=user_not_found(str(cmd.user_id)))

                if not user.compare_password(
                    cmd.current_password, self._password_service
                ):
                    self._logger.warning(
                        "Password change rejected: current password mismatch",
                        user_id=str(user.id),
                    )
                    return Failure(
                        error=unauthorized(
                            AuthErrorMessage.CURRENT_PASSWORD_INCORRECT,
                            ErrorCode.CURRENT_PASSWORD_MISMATCH,
                        )
                    )

                now = datetime.now(UTC)
                user.change_password_hash(
                    self._password_service.hash_password(cmd.new_password), now
                )
                await uow.users.update(user)
                revoked = await uow.tokens.deactivate_all_for_user(
                    user.id, TokenType.REFRESH_TOKEN, now
                )
                await uow.commit()
        except Exception as e:
            self._logger.error(
                "Password change failed", error=e, user_id=str(cmd.user_id)
            )
            return Failure(error=execution_failed("Password change failed"))

        self._logger.info(
            "Password changed", user_id=str(user.id), revoked_sessions=revoked
        )
        return Success(value=None)
