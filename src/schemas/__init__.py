"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import UserCreateRequest, AuthTokensResponse
"""

from src.schemas.auth_schemas import (
    AuthTokensResponse,
    EmailVerificationCreateRequest,
    MessageResponse,
    PasswordChangeRequest,
    PasswordResetCreateRequest,
    PasswordResetTokenCreateRequest,
    SessionCreateRequest,
    SessionDeleteResponse,
    TokenCleanupResponse,
    TokenCreateRequest,
    TokenVerificationRequest,
    TokenVerificationResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserResponse,
    VerificationEmailCreateRequest,
)

__all__ = [
    "AuthTokensResponse",
    "EmailVerificationCreateRequest",
    "MessageResponse",
    "PasswordChangeRequest",
    "PasswordResetCreateRequest",
    "PasswordResetTokenCreateRequest",
    "SessionCreateRequest",
    "SessionDeleteResponse",
    "TokenCleanupResponse",
    "TokenCreateRequest",
    "TokenVerificationRequest",
    "TokenVerificationResponse",
    "UserCreateRequest",
    "UserCreateResponse",
    "UserResponse",
    "VerificationEmailCreateRequest",
]
