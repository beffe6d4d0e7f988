"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Field types are the Annotated types used by the request schemas, so
  values arriving over HTTP are already validated and normalized
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import Email, FullName, OpaqueToken, Password, PhoneNumber


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Creates an unverified user and an email verification token.
    User cannot login until email is verified.

    Example:
        >>> command = RegisterUser(
        ...     full_name="Jane Doe",
        ...     email="jane@example.com",
        ...     password="SecurePass123!",
        ...     phone_number="+84987654321",
        ... )
        >>> result = await handler.handle(command)
    """

    full_name: FullName
    email: Email
    password: Password
    phone_number: PhoneNumber


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email/password and open a session.

    The password is not strength-checked here: legacy passwords must
    still be able to log in.
    """

    email: Email
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new access/refresh pair (rotation)."""

    refresh_token: OpaqueToken


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke every active refresh token of a user."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Issue a password reset token (response never reveals if email exists)."""

    email: Email


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password using a password reset token.

    Attributes:
        token: Password reset token from email.
        new_password: New password (validated strength).
    """

    token: OpaqueToken
    new_password: Password


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Verify email address and log the user in.

    Attributes:
        token: Email verification token (64-char hex string).
    """

    token: OpaqueToken


@dataclass(frozen=True, kw_only=True)
class ResendVerificationEmail:
    email: Email


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Change password of an authenticated user.

    Attributes:
        user_id: Authenticated user (from access token).
        current_password: Current password (plain text, compared to hash).
        new_password: New password (validated strength).
    """

    user_id: UUID
    current_password: str
    new_password: Password
