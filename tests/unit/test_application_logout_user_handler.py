"""Unit tests for LogoutUserHandler."""

import pytest

from src.application.commands.auth_commands import LogoutUser
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.core.result import Success
from src.domain.enums import TokenType
from tests.utils.factories import make_token, make_user


@pytest.mark.unit
class TestLogoutUserHandler:
    @pytest.mark.asyncio
    async def test_logout_revokes_all_refresh_tokens(self, uow, store, logger):
        """Test every active refresh token of the user is deactivated."""
        # Arrange
        user = store.add_user(make_user())
        for _ in range(2):
            store.add_token(make_token(user.id))
        store.add_token(make_token(user.id, is_active=False))
        handler = LogoutUserHandler(uow=uow, logger=logger)

        # Act
        result = await handler.handle(LogoutUser(user_id=user.id))

        # Assert
        assert isinstance(result, Success)
        assert result.value.revoked_count == 2
        assert store.active_tokens_for(user.id, TokenType.REFRESH_TOKEN) == []
        assert uow.commits == 1

    @pytest.mark.asyncio
    async def test_logout_leaves_other_users_and_token_types(self, uow, store, logger):
        # Arrange
        user = store.add_user(make_user())
        other = store.add_user(make_user(email="bob@example.com", phone_number="+10000000001"))
        store.add_token(make_token(user.id))
        verification = store.add_token(
            make_token(user.id, token_type=TokenType.EMAIL_VERIFICATION)
        )
        other_session = store.add_token(make_token(other.id))

        # Act
        await LogoutUserHandler(uow=uow, logger=logger).handle(LogoutUser(user_id=user.id))

        # Assert
        assert store.tokens[verification.id].is_active is True
        assert store.tokens[other_session.id].is_active is True

    @pytest.mark.asyncio
    async def test_logout_is_idempotent(self, uow, store, logger):
        """Test logging out twice succeeds with nothing left to revoke."""
        # Arrange
        user = store.add_user(make_user())
        store.add_token(make_token(user.id))
        handler = LogoutUserHandler(uow=uow, logger=logger)
        await handler.handle(LogoutUser(user_id=user.id))

        # Act
        result = await handler.handle(LogoutUser(user_id=user.id))

        # Assert
        assert isinstance(result, Success)
        assert result.value.revoked_count == 0
