"""Unit tests for SessionLimiter.

Tests cover:
- Nothing revoked at or below the limit
- Oldest tokens revoked first, newest kept
- Only REFRESH_TOKEN rows of the given user are considered
- Failures logged, swallowed, and rolled back to the savepoint
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from src.domain.enums import TokenType
from tests.utils.factories import make_token, make_user


def _sessions(store, user, count):
    """Add ``count`` refresh tokens, oldest first, one minute apart."""
    start = datetime.now(UTC) - timedelta(hours=1)
    return [
        store.add_token(make_token(user.id, created_at=start + timedelta(minutes=i)))
        for i in range(count)
    ]


@pytest.mark.unit
class TestSessionLimiter:
    @pytest.mark.asyncio
    async def test_under_limit_revokes_nothing(self, session_limiter, uow, store):
        # Arrange
        user = store.add_user(make_user())
        _sessions(store, user, 3)

        # Act
        revoked = await session_limiter.limit_concurrent_sessions(uow, user.id, 3)

        # Assert
        assert revoked == 0
        assert len(store.active_tokens_for(user.id, TokenType.REFRESH_TOKEN)) == 3

    @pytest.mark.asyncio
    async def test_oldest_sessions_revoked(self, session_limiter, uow, store, logger):
        """Test the newest max_sessions tokens survive."""
        # Arrange
        user = store.add_user(make_user())
        tokens = _sessions(store, user, 5)

        # Act
        revoked = await session_limiter.limit_concurrent_sessions(uow, user.id, 2)

        # Assert
        assert revoked == 3
        active_ids = {t.id for t in store.active_tokens_for(user.id, TokenType.REFRESH_TOKEN)}
        assert active_ids == {tokens[3].id, tokens[4].id}
        logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_equal_created_at_keeps_latest_inserted(self, session_limiter, uow, store):
        """Test ties on created_at are broken by insertion order."""
        # Arrange
        user = store.add_user(make_user())
        same_instant = datetime.now(UTC)
        tokens = [
            store.add_token(make_token(user.id, created_at=same_instant))
            for _ in range(3)
        ]

        # Act
        await session_limiter.limit_concurrent_sessions(uow, user.id, 1)

        # Assert
        active = store.active_tokens_for(user.id, TokenType.REFRESH_TOKEN)
        assert [t.id for t in active] == [tokens[-1].id]

    @pytest.mark.asyncio
    async def test_other_types_and_users_ignored(self, session_limiter, uow, store):
        # Arrange
        user = store.add_user(make_user())
        other = store.add_user(make_user(email="bob@example.com", phone_number="+10000000001"))
        _sessions(store, user, 2)
        _sessions(store, other, 2)
        reset = store.add_token(make_token(user.id, token_type=TokenType.PASSWORD_RESET))

        # Act
        revoked = await session_limiter.limit_concurrent_sessions(uow, user.id, 1)

        # Assert
        assert revoked == 1
        assert store.tokens[reset.id].is_active is True
        assert len(store.active_tokens_for(other.id, TokenType.REFRESH_TOKEN)) == 2

    @pytest.mark.asyncio
    async def test_failure_logged_and_rolled_back_to_savepoint(
        self, session_limiter, uow, store, logger
    ):
        """Test a failing revoke keeps earlier writes of the same unit of work."""
        # Arrange
        user = store.add_user(make_user())
        _sessions(store, user, 3)
        login_token = make_token(user.id)
        await uow.tokens.save(login_token)
        uow.tokens.deactivate_many = AsyncMock(side_effect=RuntimeError("deadlock"))

        # Act
        revoked = await session_limiter.limit_concurrent_sessions(uow, user.id, 1)
        await uow.commit()

        # Assert
        assert revoked == 0
        assert login_token.id in store.tokens
        logger.error.assert_called_once()
        assert logger.error.call_args.args[0] == "Session limit enforcement failed"
