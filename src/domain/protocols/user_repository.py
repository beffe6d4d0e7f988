"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Writes are flushed into the current unit of work and never committed
    by the repository itself.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by normalized email
        find_by_phone_number: Retrieve user by phone number
        save: Create new user
        update: Persist changes to an existing user
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Args:
            email: Normalized (trimmed, lowercase) email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_phone_number(self, phone_number: str) -> User | None:
        """Find user by phone number."""
        ...

    async def save(self, user: User) -> None:
        """Create new user.

        Args:
            user: User entity to persist.
        """
        ...

    async def update(self, user: User) -> None:
        """Update existing user (password hash, verification flag).

        Args:
            user: User entity with updated fields.
        """
        ...
