"""Common error classes shared by every layer.

Error Types:
- NotFoundError: Resource not found (unknown user id/email)
- ConflictError: Duplicate email or phone number
- AuthenticationError: Bad credentials, unverified email, unusable token

Usage:
    from src.core.errors import ConflictError
    from src.core.enums import ErrorCode

    return Failure(error=ConflictError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message="Email already registered",
        resource_type="User",
        conflicting_field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User).
        resource_id: Identifier that was looked up (id or email).
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate unique field).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, phone_number).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, unusable token)."""

    pass
