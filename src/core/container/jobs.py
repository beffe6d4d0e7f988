"""Background job dependency factories.

The cleanup service and its scheduler are app-scoped. Each sweep opens its
own unit of work through get_uow_factory(), independent of any request.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.infrastructure import (
    get_auth_config,
    get_logger,
    get_uow_factory,
)

if TYPE_CHECKING:
    from src.application.services.token_cleanup_service import TokenCleanupService
    from src.infrastructure.jobs.token_cleanup_scheduler import TokenCleanupScheduler


@lru_cache()
def get_token_cleanup_service() -> "TokenCleanupService":
    """Get token cleanup service singleton (app-scoped)."""
    from src.application.services.token_cleanup_service import TokenCleanupService

    return TokenCleanupService(
        uow_factory=get_uow_factory(),
        config=get_auth_config(),
        logger=get_logger(),
    )


@lru_cache()
def get_token_cleanup_scheduler() -> "TokenCleanupScheduler":
    """Get token cleanup scheduler singleton (app-scoped).

    Jobs are registered on first start(). Started and stopped by the
    application lifespan.
    """
    from src.infrastructure.jobs.token_cleanup_scheduler import TokenCleanupScheduler

    return TokenCleanupScheduler(
        cleanup_service=get_token_cleanup_service(),
        config=get_auth_config(),
        logger=get_logger(),
    )
