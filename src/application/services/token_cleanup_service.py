"""Token cleanup service.

Physically deletes tokens that can no longer be used:

- Expired sweep: every token past ``expires_at``, active or not.
- Stale-inactive sweep: inactive tokens whose last update is older than the
  retention window (kept that long for audit).

Scheduled sweeps log and swallow failures so the next tick can retry.
``force_cleanup`` is the operator entry point and propagates failures.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from src.application.dtos.auth_dtos import CleanupReport
from src.core.config import AuthConfig
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWorkProtocol


class TokenCleanupService:
    """Expired and stale-inactive token purge.

    Each sweep opens its own unit of work from ``uow_factory``.

    Example:
        >>> service = TokenCleanupService(
        ...     uow_factory=container.uow_factory,
        ...     config=auth_config,
        ...     logger=logger,
        ... )
        >>> report = await service.force_cleanup()
    """

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWorkProtocol],
        config: AuthConfig,
        logger: LoggerProtocol,
    ) -> None:
        self._uow_factory = uow_factory
        self._config = config
        self._logger = logger

    async def delete_expired(self) -> int:
        """Delete every token whose expiry has passed.

        Raises:
            Exception: Propagates storage failures.
        """
        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            deleted = await uow.tokens.delete_expired(now)
            await uow.commit()
        return deleted

    async def delete_stale_inactive(self, retention_days: int) -> int:
        """Delete inactive tokens not updated within ``retention_days``.

        Raises:
            Exception: Propagates storage failures.
        """
        cutoff = datetime.now(UTC) - timedelta(days=retention_days)
        async with self._uow_factory() as uow:
            deleted = await uow.tokens.delete_inactive_before(cutoff)
            await uow.commit()
        return deleted

    async def purge_expired(self) -> int:
        """Scheduled expired sweep. Returns rows deleted, 0 on failure."""
        try:
            deleted = await self.delete_expired()
        except Exception as e:
            self._logger.error("Expired token cleanup failed", error=e)
            return 0

        self._logger.info("Expired tokens cleaned up", deleted_count=deleted)
        return deleted

    async def purge_stale_inactive(self, retention_days: int | None = None) -> int:
        """Scheduled stale-inactive sweep. Returns rows deleted, 0 on failure.

        Args:
            retention_days: Override for the configured retention window.
        """
        days = (
            retention_days
            if retention_days is not None
            else self._config.inactive_retention_days
        )
        try:
            deleted = await self.delete_stale_inactive(days)
        except Exception as e:
            self._logger.error(
                "Inactive token cleanup failed", error=e, retention_days=days
            )
            return 0

        self._logger.info(
            "Inactive tokens cleaned up", deleted_count=deleted, retention_days=days
        )
        return deleted

    async def force_cleanup(self) -> CleanupReport:
        """Run both sweeps now with the shorter forced retention.

        Returns:
            CleanupReport with the rows deleted by each sweep.

        Raises:
            Exception: Any storage failure, unlike the scheduled sweeps.
        """
        self._logger.info("Forced token cleanup started")
        expired = await self.delete_expired()
        inactive = await self.delete_stale_inactive(
            self._config.forced_inactive_retention_days
        )
        self._logger.info(
            "Forced token cleanup finished",
            expired_count=expired,
            inactive_count=inactive,
        )
        return CleanupReport(expired=expired, inactive=inactive)
