"""TokenRepository - SQLAlchemy implementation for opaque token persistence.

Handles refresh, email verification and password reset tokens. State
changes use set-based UPDATE/DELETE statements so that concurrent
consumers are arbitrated by the database, not by in-memory objects.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.token import Token
from src.domain.enums import TokenType
from src.infrastructure.persistence.models.token import TokenModel


def _to_domain(model: TokenModel) -> Token:
    """Convert database model to domain entity."""
    return Token(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        type=model.type,
        expires_at=model.expires_at,
        is_active=model.is_active,
        revoked_at=model.revoked_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class TokenRepository:
    """SQLAlchemy implementation of TokenRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = TokenRepository(session)
        ...     token = await repo.find_by_token(value, TokenType.REFRESH_TOKEN)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, token: Token) -> None:
        """Add a new token to the current transaction."""
        self.session.add(
            TokenModel(
                id=token.id,
                user_id=token.user_id,
                token=token.token,
                type=token.type,
                expires_at=token.expires_at,
                is_active=token.is_active,
                revoked_at=token.revoked_at,
                created_at=token.created_at,
                updated_at=token.updated_at,
            )
        )
        await self.session.flush()

    async def find_by_token(self, token: str, token_type: TokenType) -> Token | None:
        """Find token by value and type (any state)."""
        stmt = (
            select(TokenModel)
            .where(TokenModel.token == token)
            .where(TokenModel.type == token_type)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def deactivate(self, token_id: UUID, now: datetime) -> bool:
        """Conditionally deactivate one token.

        Returns:
            True only if this statement flipped ``is_active`` (rowcount 1).
        """
        stmt = (
            update(TokenModel)
            .where(TokenModel.id == token_id)
            .where(TokenModel.is_active.is_(True))
            .values(is_active=False, revoked_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def deactivate_all_for_user(
        self,
        user_id: UUID,
        token_type: TokenType,
        now: datetime,
    ) -> int:
        """Deactivate every active token of one type for a user.

        Used by logout, password reset/change (refresh tokens) and by token
        reissue (verification and reset tokens).
        """
        stmt = (
            update(TokenModel)
            .where(TokenModel.user_id == user_id)
            .where(TokenModel.type == token_type)
            .where(TokenModel.is_active.is_(True))
            .values(is_active=False, revoked_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def list_active_for_user(
        self,
        user_id: UUID,
        token_type: TokenType,
    ) -> list[Token]:
        """List active tokens newest first (created_at desc, id desc)."""
        stmt = (
            select(TokenModel)
            .where(TokenModel.user_id == user_id)
            .where(TokenModel.type == token_type)
            .where(TokenModel.is_active.is_(True))
            .order_by(TokenModel.created_at.desc(), TokenModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def deactivate_many(self, token_ids: list[UUID], now: datetime) -> int:
        if not token_ids:
            return 0
        stmt = (
            update(TokenModel)
            .where(TokenModel.id.in_(token_ids))
            .where(TokenModel.is_active.is_(True))
            .values(is_active=False, revoked_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete every token whose expiry has passed.

        Returns:
            Number of rows deleted.
        """
        stmt = (
            delete(TokenModel)
            .where(TokenModel.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_inactive_before(self, cutoff: datetime) -> int:
        """Delete inactive tokens whose last update is older than cutoff."""
        stmt = (
            delete(TokenModel)
            .where(TokenModel.is_active.is_(False))
            .where(TokenModel.updated_at < cutoff)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
