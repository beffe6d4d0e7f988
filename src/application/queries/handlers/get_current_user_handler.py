"""Get current user query handler.

Returns the profile of the user behind an access token. Users that were
deactivated after the token was issued are reported as NOT_FOUND.
"""

from src.application.dtos.auth_dtos import UserView
from src.application.errors import ApplicationError, execution_failed, user_not_found
from src.application.queries.auth_queries import GetCurrentUser
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UnitOfWorkProtocol


class GetCurrentUserHandler:
    """Handler for the current user profile."""

    def __init__(self, uow: UnitOfWorkProtocol, logger: LoggerProtocol) -> None:
        self._uow = uow
        self._logger = logger

    async def handle(self, query: GetCurrentUser) -> Result[UserView, ApplicationError]:
        """Handle get current user query.

        Returns:
            Success(UserView) for an existing, active user.
            Failure(ApplicationError) with NOT_FOUND otherwise.
        """
        try:
            async with self._uow as uow:
                user = await uow.users.find_by_id(query.user_id)
        except Exception as e:
            self._logger.error(
                "Current user lookup failed", error=e, user_id=str(query.user_id)
            )
            return Failure(error=execution_failed("Could not load user"))

        if user is None or not user.is_active:
            return Failure(error=user_not_found(str(query.user_id)))

        return Success(value=UserView.from_user(user))
