"""Session limiter.

Caps the number of concurrently active refresh tokens per user. Runs after
a new refresh token has been inserted, inside a savepoint of the caller's
unit of work, so a failure here never undoes the login that triggered it.

Ordering:
    Active tokens are ranked newest first (created_at desc, id desc). The
    newest ``max_sessions`` survive, which always includes the token that
    was just issued.
"""

from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums import TokenType
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWorkProtocol


class SessionLimiter:
    """Deactivates the oldest refresh tokens beyond the per-user limit.

    Example:
        >>> limiter = SessionLimiter(logger=logger)
        >>> revoked = await limiter.limit_concurrent_sessions(uow, user.id, 5)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def limit_concurrent_sessions(
        self,
        uow: UnitOfWorkProtocol,
        user_id: UUID,
        max_sessions: int,
    ) -> int:
        """Keep at most ``max_sessions`` active refresh tokens for a user.

        Args:
            uow: Unit of work of the calling login/verification.
            user_id: User whose sessions are reconciled.
            max_sessions: Maximum active refresh tokens to keep.

        Returns:
            Number of tokens deactivated. 0 when nothing exceeded the limit
            or when the reconciliation failed (failure is logged).
        """
        now = datetime.now(UTC)
        try:
            async with uow.savepoint():
                active = await uow.tokens.list_active_for_user(
                    user_id, TokenType.REFRESH_TOKEN
                )
                excess = active[max_sessions:]
                if not excess:
                    return 0
                revoked = await uow.tokens.deactivate_many(
                    [token.id for token in excess], now
                )
        except Exception as e:
            self._logger.error(
                "Session limit enforcement failed",
                error=e,
                user_id=str(user_id),
                max_sessions=max_sessions,
            )
            return 0

        self._logger.info(
            "Session limit enforced",
            user_id=str(user_id),
            max_sessions=max_sessions,
            revoked_count=revoked,
        )
        return revoked
