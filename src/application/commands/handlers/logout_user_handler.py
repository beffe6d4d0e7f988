"""Logout handler.

Revokes every active refresh token of the user. Idempotent: logging out
with no active sessions succeeds with ``revoked_count=0``. Access tokens
already handed out stay valid until they expire.
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import LogoutUser
from src.application.dtos.auth_dtos import LogoutResult
from src.application.errors import ApplicationError, execution_failed
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.protocols import LoggerProtocol, UnitOfWorkProtocol


class LogoutUserHandler:
    """Handler for user logout command."""

    def __init__(self, uow: UnitOfWorkProtocol, logger: LoggerProtocol) -> None:
        self._uow = uow
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[LogoutResult, ApplicationError]:
        try:
            async with self._uow as uow:
                revoked = await uow.tokens.deactivate_all_for_user(
                    cmd.user_id, TokenType.REFRESH_TOKEN, datetime.now(UTC)
                )
                await uow.commit()
        except Exception as e:
            self._logger.error("Logout failed", error=e, user_id=str(cmd.user_id))
            return Failure(error=execution_failed("Logout failed"))

        self._logger.info(
            "User logged out", user_id=str(cmd.user_id), revoked_count=revoked
        )
        return Success(value=LogoutResult(revoked_count=revoked))
