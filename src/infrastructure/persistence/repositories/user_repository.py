"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.models.user import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Writes are flushed, never committed. The owning unit of work decides
    when the transaction ends.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by normalized email address."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_phone_number(self, phone_number: str) -> User | None:
        stmt = select(UserModel).where(UserModel.phone_number == phone_number)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Add a new user to the current transaction."""
        self.session.add(self._to_model(user))
        await self.session.flush()

    async def update(self, user: User) -> None:
        """Copy mutable fields of the domain entity onto the stored row.

        Raises:
            sqlalchemy.exc.NoResultFound: If the user does not exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.full_name = user.full_name
        user_model.password_hash = user.password_hash
        user_model.is_active = user.is_active
        user_model.is_email_verified = user.is_email_verified
        user_model.role = user.role
        user_model.updated_at = user.updated_at

        await self.session.flush()

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            full_name=user_model.full_name,
            email=user_model.email,
            password_hash=user_model.password_hash,
            phone_number=user_model.phone_number,
            role=user_model.role,
            is_active=user_model.is_active,
            is_email_verified=user_model.is_email_verified,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            password_hash=user.password_hash,
            phone_number=user.phone_number,
            role=user.role,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
