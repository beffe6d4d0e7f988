"""User domain entity for authentication.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from src.domain.enums import UserRole

if TYPE_CHECKING:
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol


@dataclass
class User:
    """User domain entity with authentication business rules.

    Business Rules:
        - Email verification required before login
        - Inactive users never authenticate
        - Email and phone number are globally unique (enforced by storage)
        - Users are never hard-deleted by the auth subsystem

    Attributes:
        id: Unique user identifier (UUIDv7)
        full_name: Display name, trimmed, at most 100 characters
        email: Normalized email (trimmed, lowercase)
        password_hash: Bcrypt hashed password (never plaintext)
        phone_number: Trimmed phone number
        role: Storefront role (defaults to CUSTOMER)
        is_active: Account active status (deactivated users cannot login)
        is_email_verified: Email verification status (blocks login if False)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     full_name="Jane Doe",
        ...     email="jane@example.com",
        ...     password_hash="$2b$12$...",
        ...     phone_number="+15551234567",
        ...     created_at=now,
        ...     updated_at=now,
        ... )
        >>> user.can_login()
        False
    """

    id: UUID
    full_name: str
    email: str
    password_hash: str
    phone_number: str
    created_at: datetime
    updated_at: datetime
    role: UserRole = UserRole.CUSTOMER
    is_active: bool = True
    is_email_verified: bool = False

    def compare_password(
        self,
        plaintext: str,
        hasher: "PasswordHashingProtocol",
    ) -> bool:
        """Check a plaintext password against the stored hash.

        Args:
            plaintext: Password supplied by the caller.
            hasher: Password hashing port used to compare.

        Returns:
            bool: True if the password matches.
        """
        return hasher.verify_password(plaintext, self.password_hash)

    def can_login(self) -> bool:
        """Active and email-verified accounts may receive tokens."""
        return self.is_active and self.is_email_verified

    def mark_email_verified(self, now: datetime) -> None:
        self.is_email_verified = True
        self.updated_at = now

    def change_password_hash(self, password_hash: str, now: datetime) -> None:
        """Replace the stored hash (the caller hashes the new password)."""
        self.password_hash = password_hash
        self.updated_at = now
