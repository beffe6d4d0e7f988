"""Periodic token cleanup runner.

Schedules the two cleanup sweeps on APScheduler's AsyncIOScheduler, each
with its own CronTrigger. Started and stopped from the FastAPI lifespan.

Usage:
    scheduler = TokenCleanupScheduler(cleanup_service, config, logger)
    scheduler.start()
    ...
    scheduler.shutdown()
"""

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from src.application.dtos.auth_dtos import CleanupReport
from src.application.services.token_cleanup_service import TokenCleanupService
from src.core.config import AuthConfig
from src.domain.protocols.logger_protocol import LoggerProtocol

EXPIRED_SWEEP_JOB_ID = "token_cleanup_expired"
INACTIVE_SWEEP_JOB_ID = "token_cleanup_inactive"


class TokenCleanupScheduler:
    """Cron-driven runner for TokenCleanupService.

    Attributes:
        scheduler: Underlying APScheduler instance.
    """

    def __init__(
        self,
        cleanup_service: TokenCleanupService,
        config: AuthConfig,
        logger: LoggerProtocol,
        scheduler: AsyncIOScheduler | None = None,
    ) -> None:
        self._cleanup_service = cleanup_service
        self._config = config
        self._logger = logger
        self.scheduler = scheduler or AsyncIOScheduler(timezone="UTC")

    def register_jobs(self) -> None:
        """Add (or replace) both sweep jobs on the scheduler."""
        self.scheduler.add_job(
            self._cleanup_service.purge_expired,
            CronTrigger.from_crontab(self._config.expired_cleanup_cron, timezone="UTC"),
            id=EXPIRED_SWEEP_JOB_ID,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )
        self.scheduler.add_job(
            self._cleanup_service.purge_stale_inactive,
            CronTrigger.from_crontab(self._config.inactive_cleanup_cron, timezone="UTC"),
            id=INACTIVE_SWEEP_JOB_ID,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )

    def start(self) -> None:
        """Register jobs and start the scheduler (requires a running event loop)."""
        self.register_jobs()
        self.scheduler.start()
        self._logger.info(
            "Token cleanup scheduler started",
            expired_cron=self._config.expired_cleanup_cron,
            inactive_cron=self._config.inactive_cleanup_cron,
        )

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            self._logger.info("Token cleanup scheduler stopped")

    async def trigger_now(self) -> CleanupReport:
        """Run a forced cleanup immediately (errors propagate)."""
        return await self._cleanup_service.force_cleanup()
