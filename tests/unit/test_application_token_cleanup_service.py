"""Unit tests for TokenCleanupService.

Tests cover:
- Expired sweep deletes every expired token (active or not)
- Stale-inactive sweep honors the retention window
- Scheduled sweeps swallow failures, forced cleanup propagates them
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from src.application.dtos import CleanupReport
from src.application.services.token_cleanup_service import TokenCleanupService
from src.domain.enums import TokenType
from tests.utils.factories import make_token, make_user
from tests.utils.in_memory import InMemoryUnitOfWork


@pytest.fixture
def service(store, auth_config, logger):
    return TokenCleanupService(
        uow_factory=lambda: InMemoryUnitOfWork(store), config=auth_config, logger=logger
    )


def _seed(store):
    """One user with a mix of live, expired and stale tokens."""
    user = store.add_user(make_user())
    now = datetime.now(UTC)
    return {
        "live": store.add_token(make_token(user.id)),
        "expired_active": store.add_token(
            make_token(user.id, expires_in=timedelta(seconds=-1))
        ),
        "expired_reset": store.add_token(
            make_token(
                user.id,
                token_type=TokenType.PASSWORD_RESET,
                expires_in=timedelta(seconds=-1),
                is_active=False,
            )
        ),
        "inactive_40d": store.add_token(
            make_token(
                user.id,
                is_active=False,
                created_at=now - timedelta(days=40),
                expires_in=timedelta(days=400),
            )
        ),
        "inactive_10d": store.add_token(
            make_token(
                user.id,
                is_active=False,
                created_at=now - timedelta(days=10),
                expires_in=timedelta(days=400),
            )
        ),
        "inactive_1d": store.add_token(
            make_token(
                user.id,
                is_active=False,
                created_at=now - timedelta(days=1),
                expires_in=timedelta(days=400),
            )
        ),
    }


@pytest.mark.unit
class TestScheduledSweeps:
    @pytest.mark.asyncio
    async def test_purge_expired_deletes_only_expired(self, service, store):
        # Arrange
        tokens = _seed(store)

        # Act
        deleted = await service.purge_expired()

        # Assert
        assert deleted == 2
        assert tokens["expired_active"].id not in store.tokens
        assert tokens["expired_reset"].id not in store.tokens
        assert tokens["live"].id in store.tokens

    @pytest.mark.asyncio
    async def test_purge_stale_inactive_uses_configured_retention(self, service, store):
        """Test the default 30 day window only removes the 40 day old row."""
        # Arrange
        tokens = _seed(store)

        # Act
        deleted = await service.purge_stale_inactive()

        # Assert
        assert deleted == 1
        assert tokens["inactive_40d"].id not in store.tokens
        assert tokens["inactive_10d"].id in store.tokens
        assert tokens["live"].id in store.tokens

    @pytest.mark.asyncio
    async def test_purge_stale_inactive_override(self, service, store):
        tokens = _seed(store)

        deleted = await service.purge_stale_inactive(retention_days=5)

        assert deleted == 2
        assert tokens["inactive_1d"].id in store.tokens

    @pytest.mark.asyncio
    async def test_scheduled_sweep_failure_returns_zero(self, store, auth_config, logger):
        """Test a storage failure is logged and reported as zero rows."""
        # Arrange
        broken = InMemoryUnitOfWork(store)
        broken.tokens.delete_expired = AsyncMock(side_effect=RuntimeError("db down"))
        service = TokenCleanupService(
            uow_factory=lambda: broken, config=auth_config, logger=logger
        )

        # Act
        deleted = await service.purge_expired()

        # Assert
        assert deleted == 0
        logger.error.assert_called_once()


@pytest.mark.unit
class TestForcedCleanup:
    @pytest.mark.asyncio
    async def test_force_cleanup_uses_short_retention(self, service, store):
        """Test forced run deletes expired rows and inactive rows older than 7 days."""
        # Arrange
        tokens = _seed(store)

        # Act
        report = await service.force_cleanup()

        # Assert
        assert report == CleanupReport(expired=2, inactive=2)
        assert set(store.tokens) == {tokens["live"].id, tokens["inactive_1d"].id}

    @pytest.mark.asyncio
    async def test_force_cleanup_propagates_errors(self, store, auth_config, logger):
        # Arrange
        broken = InMemoryUnitOfWork(store)
        broken.tokens.delete_expired = AsyncMock(side_effect=RuntimeError("db down"))
        service = TokenCleanupService(
            uow_factory=lambda: broken, config=auth_config, logger=logger
        )

        # Act / Assert
        with pytest.raises(RuntimeError, match="db down"):
            await service.force_cleanup()
