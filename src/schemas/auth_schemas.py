"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints:
    POST   /api/v1/users                    - Create user (registration)
    GET    /api/v1/users/me                 - Current user
    PATCH  /api/v1/users/me/password        - Change password
    POST   /api/v1/sessions                 - Create session (login)
    DELETE /api/v1/sessions                 - Delete all sessions (logout)
    POST   /api/v1/tokens                   - Create tokens (refresh)
    POST   /api/v1/token-verifications      - Verify an access token
    POST   /api/v1/email-verifications      - Create verification (verify email)
    POST   /api/v1/verification-emails      - Resend verification email
    POST   /api/v1/password-reset-tokens    - Create reset token (request)
    POST   /api/v1/password-resets          - Create reset (execute)
    POST   /api/v1/admin/token-cleanups     - Force token cleanup
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.auth_dtos import AuthResult, UserView
from src.domain.types import Email, FullName, OpaqueToken, Password, PhoneNumber


# =============================================================================
# Users
# =============================================================================


class UserResponse(BaseModel):
    """Public user representation."""

    id: UUID = Field(..., description="User's ID")
    full_name: str = Field(..., description="Display name")
    email: str = Field(..., description="Normalized email address")
    phone_number: str = Field(..., description="Phone number")
    role: str = Field(..., description="Storefront role", examples=["customer"])
    is_active: bool = Field(..., description="Whether the account is active")
    is_email_verified: bool = Field(..., description="Email verification status")
    created_at: datetime = Field(..., description="Registration time")

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        return cls(
            id=view.id,
            full_name=view.full_name,
            email=view.email,
            phone_number=view.phone_number,
            role=view.role.value,
            is_active=view.is_active,
            is_email_verified=view.is_email_verified,
            created_at=view.created_at,
        )


class UserCreateRequest(BaseModel):
    """Request schema for user creation (registration).

    POST /api/v1/users
    Returns: 201 Created
    """

    full_name: FullName
    email: Email
    password: Password
    phone_number: PhoneNumber

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "full_name": "Jane Doe",
                "email": "jane@example.com",
                "password": "SecurePass123!",
                "phone_number": "+84987654321",
            }
        }
    )


class UserCreateResponse(BaseModel):
    """Response schema for user creation (201 Created).

    No tokens are returned. The user must verify their email first.
    """

    user: UserResponse
    requires_email_verification: bool = Field(default=True)
    message: str = Field(
        default="Registration successful. Please check your email to verify your account.",
        description="Success message",
    )


class PasswordChangeRequest(BaseModel):
    """Request schema for password change.

    PATCH /api/v1/users/me/password
    Returns: 200 OK
    """

    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: Password


class MessageResponse(BaseModel):
    message: str = Field(..., description="Human-readable outcome")


# =============================================================================
# Sessions (login / logout)
# =============================================================================


class SessionCreateRequest(BaseModel):
    """Request schema for session creation (login).

    POST /api/v1/sessions
    Returns: 201 Created
    """

    email: Email
    password: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="User's password",
        examples=["SecurePass123!"],
    )


class AuthTokensResponse(BaseModel):
    """Token pair returned by login, refresh and email verification."""

    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token")
    token_type: str = Field(default="Bearer", description="Authorization scheme")
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserResponse

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthTokensResponse":
        return cls(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
            user=UserResponse.from_view(result.user),
        )


class SessionDeleteResponse(BaseModel):
    """Response schema for logout."""

    revoked_count: int = Field(..., description="Refresh tokens revoked")
    message: str = Field(default="Logged out successfully")


# =============================================================================
# Tokens
# =============================================================================


class TokenCreateRequest(BaseModel):
    """Request schema for token refresh.

    POST /api/v1/tokens
    Returns: 201 Created
    """

    refresh_token: OpaqueToken


class TokenVerificationRequest(BaseModel):
    access_token: str = Field(..., min_length=1, description="JWT access token")


class TokenVerificationResponse(BaseModel):
    """Claims of a valid access token."""

    user_id: UUID
    email: str
    role: str
    is_valid: bool
    expires_at: datetime


# =============================================================================
# Email verification
# =============================================================================


class EmailVerificationCreateRequest(BaseModel):
    """Request schema for email verification.

    POST /api/v1/email-verifications
    Returns: 201 Created with a token pair (verification logs the user in)
    """

    token: OpaqueToken


class VerificationEmailCreateRequest(BaseModel):
    """Request schema for resending the verification email.

    POST /api/v1/verification-emails
    Returns: 202 Accepted
    """

    email: Email


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetTokenCreateRequest(BaseModel):
    """Request schema for password reset token creation.

    POST /api/v1/password-reset-tokens
    Returns: 202 Accepted (always, to prevent user enumeration)
    """

    email: Email


class PasswordResetCreateRequest(BaseModel):
    """Request schema for password reset execution.

    POST /api/v1/password-resets
    Returns: 200 OK
    """

    token: OpaqueToken
    new_password: Password


# =============================================================================
# Admin
# =============================================================================


class TokenCleanupResponse(BaseModel):
    """Rows removed by a forced cleanup."""

    expired: int = Field(..., description="Expired tokens deleted")
    inactive: int = Field(..., description="Stale inactive tokens deleted")
