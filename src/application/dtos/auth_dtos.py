"""Authentication DTOs (Data Transfer Objects).

Result dataclasses returned by authentication handlers and carried to the
presentation layer.

DTOs:
    - UserView: Public view of a user (no password hash)
    - RegistrationResult: Result of RegisterUser
    - AuthResult: Result of login, refresh and email verification
    - LogoutResult: Result of LogoutUser
    - AccessTokenInfo: Result of access token verification
    - CleanupReport: Result of a forced token cleanup
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.user import User
from src.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class UserView:
    """Public user data.

    Attributes:
        id: User's unique identifier.
        full_name: Display name.
        email: Normalized email.
        phone_number: Phone number.
        role: Storefront role.
        is_active: Account active status.
        is_email_verified: Email verification status.
        created_at: Registration time.
    """

    id: UUID
    full_name: str
    email: str
    phone_number: str
    role: UserRole
    is_active: bool
    is_email_verified: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            phone_number=user.phone_number,
            role=user.role,
            is_active=user.is_active,
            is_email_verified=user.is_email_verified,
            created_at=user.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class RegistrationResult:
    """Registration outcome. No tokens are issued until email is verified."""

    user: UserView
    requires_email_verification: bool = True


@dataclass(frozen=True, kw_only=True)
class AuthResult:
    """Tokens handed to an authenticated client.

    Attributes:
        user: Authenticated user.
        access_token: JWT access token (short-lived).
        refresh_token: Opaque refresh token (long-lived).
        expires_in: Access token lifetime in seconds.
        token_type: Always "Bearer".
    """

    user: UserView
    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "Bearer"


@dataclass(frozen=True, kw_only=True)
class LogoutResult:
    revoked_count: int


@dataclass(frozen=True, kw_only=True)
class AccessTokenInfo:
    """Claims of a verified access token whose subject is still active."""

    user_id: UUID
    email: str
    role: UserRole
    is_valid: bool
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class CleanupReport:
    """Rows removed by a forced cleanup.

    Attributes:
        expired: Tokens deleted because they were past expiry.
        inactive: Inactive tokens deleted because they were past retention.
    """

    expired: int
    inactive: int
