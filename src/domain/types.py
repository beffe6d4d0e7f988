"""Annotated types with centralized validation.

Define validation once, use everywhere. Request schemas in the
presentation layer declare their fields with these types.

Usage:
    from src.domain.types import Email, Password, OpaqueToken

    class RegisterRequest(BaseModel):
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_full_name,
    validate_phone_number,
    validate_strong_password,
    validate_token_format,
)

# ============================================================================
# Authentication Types
# ============================================================================

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, trimmed and normalized to lowercase.

Examples:
    >>> from pydantic import BaseModel
    >>> class UserCreate(BaseModel):
    ...     email: Email
    >>> UserCreate(email=" User@Example.COM").email
    'user@example.com'
"""

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="Password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation.

Requirements:
- At least 8 characters
- At least one uppercase letter, one lowercase letter, one digit
- At least one special character
"""

FullName = Annotated[
    str,
    Field(
        min_length=1,
        max_length=120,
        description="Full display name (trimmed, at most 100 characters)",
        examples=["Jane Doe"],
    ),
    AfterValidator(validate_full_name),
]

PhoneNumber = Annotated[
    str,
    Field(
        min_length=8,
        max_length=20,
        description="Phone number (optional leading +, 8 to 15 digits)",
        examples=["+84987654321"],
    ),
    AfterValidator(validate_phone_number),
]

OpaqueToken = Annotated[
    str,
    Field(
        min_length=16,
        max_length=128,
        description="Opaque refresh, verification or password reset token (hex)",
        examples=["9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"],
    ),
    AfterValidator(validate_token_format),
]
"""Opaque token issued by the service.

Format:
- Hexadecimal string (32 random bytes = 64 characters)
- Used for refresh, email verification and password reset flows
"""
