"""Integration tests for the SQLAlchemy repositories and unit of work.

Run against a disposable PostgreSQL database named by TEST_DATABASE_URL
(postgresql+asyncpg://...). Tables are created and dropped per test.
Skipped when the variable is unset.

Tests cover:
- User round trip and unique constraints
- Conditional deactivate (affected-row check)
- Active listing order and bulk deactivation
- Expired and stale-inactive deletes
- Rollback on exit without commit, savepoint rollback
"""

import os
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from src.domain.enums import TokenType
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from tests.utils.factories import make_token, make_user

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set (PostgreSQL required)"
    ),
]


@pytest.fixture
async def database():
    db = Database(TEST_DATABASE_URL, pool_size=2)
    await db.drop_all()
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


def _uow(database: Database) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(database.async_session(), close_on_exit=True)


async def _persist(database, user, *tokens):
    async with _uow(database) as uow:
        await uow.users.save(user)
        for token in tokens:
            await uow.tokens.save(token)
        await uow.commit()


class TestUserRepository:
    async def test_save_and_find(self, database):
        # Arrange
        user = make_user()
        await _persist(database, user)

        # Act
        async with _uow(database) as uow:
            by_id = await uow.users.find_by_id(user.id)
            by_email = await uow.users.find_by_email(user.email)
            by_phone = await uow.users.find_by_phone_number(user.phone_number)

        # Assert
        assert by_id == by_email == by_phone
        assert by_id.password_hash == user.password_hash
        assert by_id.is_email_verified is True

    async def test_duplicate_email_violates_constraint(self, database):
        await _persist(database, make_user())

        with pytest.raises(IntegrityError):
            async with _uow(database) as uow:
                await uow.users.save(make_user(phone_number="+10000000009"))

    async def test_update_persists_changes(self, database):
        # Arrange
        user = make_user(is_email_verified=False)
        await _persist(database, user)

        # Act
        async with _uow(database) as uow:
            stored = await uow.users.find_by_id(user.id)
            stored.mark_email_verified(datetime.now(UTC))
            await uow.users.update(stored)
            await uow.commit()

        # Assert
        async with _uow(database) as uow:
            assert (await uow.users.find_by_id(user.id)).is_email_verified is True


class TestTokenRepository:
    async def test_deactivate_only_once(self, database):
        """Test the second conditional deactivate affects no row."""
        # Arrange
        user = make_user()
        token = make_token(user.id)
        await _persist(database, user, token)
        now = datetime.now(UTC)

        # Act
        async with _uow(database) as uow:
            first = await uow.tokens.deactivate(token.id, now)
            second = await uow.tokens.deactivate(token.id, now)
            await uow.commit()

        # Assert
        assert (first, second) == (True, False)
        async with _uow(database) as uow:
            stored = await uow.tokens.find_by_token(token.token, TokenType.REFRESH_TOKEN)
        assert stored.is_active is False
        assert stored.revoked_at is not None

    async def test_list_active_newest_first(self, database):
        # Arrange
        user = make_user()
        start = datetime.now(UTC) - timedelta(hours=1)
        tokens = [
            make_token(user.id, created_at=start + timedelta(minutes=i)) for i in range(3)
        ]
        revoked = make_token(user.id, is_active=False)
        await _persist(database, user, *tokens, revoked)

        # Act
        async with _uow(database) as uow:
            active = await uow.tokens.list_active_for_user(user.id, TokenType.REFRESH_TOKEN)

        # Assert
        assert [t.id for t in active] == [tokens[2].id, tokens[1].id, tokens[0].id]

    async def test_bulk_deactivation(self, database):
        # Arrange
        user = make_user()
        sessions = [make_token(user.id) for _ in range(3)]
        reset = make_token(user.id, token_type=TokenType.PASSWORD_RESET)
        await _persist(database, user, *sessions, reset)
        now = datetime.now(UTC)

        # Act
        async with _uow(database) as uow:
            many = await uow.tokens.deactivate_many([sessions[0].id], now)
            rest = await uow.tokens.deactivate_all_for_user(
                user.id, TokenType.REFRESH_TOKEN, now
            )
            await uow.commit()

        # Assert
        assert (many, rest) == (1, 2)
        async with _uow(database) as uow:
            assert await uow.tokens.list_active_for_user(
                user.id, TokenType.REFRESH_TOKEN
            ) == []
            assert len(
                await uow.tokens.list_active_for_user(user.id, TokenType.PASSWORD_RESET)
            ) == 1

    async def test_cleanup_deletes(self, database):
        """Test expired and stale-inactive deletes hit only their rows."""
        # Arrange
        user = make_user()
        now = datetime.now(UTC)
        live = make_token(user.id)
        expired = make_token(user.id, expires_in=timedelta(seconds=-1))
        stale = make_token(
            user.id,
            is_active=False,
            created_at=now - timedelta(days=40),
            expires_in=timedelta(days=400),
        )
        await _persist(database, user, live, expired, stale)

        # Act
        async with _uow(database) as uow:
            expired_count = await uow.tokens.delete_expired(now)
            stale_count = await uow.tokens.delete_inactive_before(now - timedelta(days=30))
            await uow.commit()

        # Assert
        assert (expired_count, stale_count) == (1, 1)
        async with _uow(database) as uow:
            assert await uow.tokens.find_by_token(live.token, TokenType.REFRESH_TOKEN)
            assert not await uow.tokens.find_by_token(stale.token, TokenType.REFRESH_TOKEN)


class TestSqlAlchemyUnitOfWork:
    async def test_exit_without_commit_rolls_back(self, database):
        user = make_user()

        async with _uow(database) as uow:
            await uow.users.save(user)

        async with _uow(database) as uow:
            assert await uow.users.find_by_id(user.id) is None

    async def test_savepoint_rolls_back_inner_block_only(self, database):
        """Test a failed savepoint keeps the outer transaction's writes."""
        # Arrange
        user = make_user()
        await _persist(database, user)
        token = make_token(user.id)

        # Act
        async with _uow(database) as uow:
            await uow.tokens.save(token)
            with pytest.raises(RuntimeError):
                async with uow.savepoint():
                    await uow.tokens.deactivate(token.id, datetime.now(UTC))
                    raise RuntimeError("inner failure")
            await uow.commit()

        # Assert
        async with _uow(database) as uow:
            stored = await uow.tokens.find_by_token(token.token, TokenType.REFRESH_TOKEN)
        assert stored.is_active is True
