"""Background jobs infrastructure package.

- TokenCleanupScheduler: APScheduler runner for the token cleanup sweeps
"""

from src.infrastructure.jobs.token_cleanup_scheduler import TokenCleanupScheduler

__all__ = ["TokenCleanupScheduler"]
