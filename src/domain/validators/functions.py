"""Centralized validation functions.

All validation logic defined once, reused everywhere via Annotated types.
Validators are pure functions that raise ValueError on validation failure.
"""

import re

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
PHONE_NUMBER_PATTERN = r"^\+?[0-9]{8,15}$"
PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>_-+=[]\\/~`;\''
FULL_NAME_MAX_LENGTH = 100


def normalize_email(v: str) -> str:
    """Trim and lowercase an email address."""
    return v.strip().lower()


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (trimmed, lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("  User@Example.COM ")
        'user@example.com'
    """
    normalized = normalize_email(v)
    if not re.match(EMAIL_PATTERN, normalized):
        raise ValueError(f"Invalid email format: {v}")
    return normalized


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Requires at least 8 characters with an uppercase letter, a lowercase
    letter, a digit and a special character.

    Raises:
        ValueError: If password doesn't meet requirements.

    Example:
        >>> validate_strong_password("SecurePass123!")
        'SecurePass123!'
        >>> validate_strong_password("weak")
        ValueError: Password must be at least 8 characters
    """
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain lowercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain digit")
    if not any(c in PASSWORD_SPECIAL_CHARACTERS for c in v):
        raise ValueError("Password must contain special character")
    return v


def validate_full_name(v: str) -> str:
    """Trim a display name and bound its length.

    Raises:
        ValueError: If the trimmed name is empty or longer than 100 characters.
    """
    name = v.strip()
    if not name:
        raise ValueError("Full name cannot be empty")
    if len(name) > FULL_NAME_MAX_LENGTH:
        raise ValueError(
            f"Full name must be at most {FULL_NAME_MAX_LENGTH} characters"
        )
    return name


def validate_phone_number(v: str) -> str:
    """Validate a phone number (optional leading +, 8 to 15 digits).

    Example:
        >>> validate_phone_number(" +84987654321 ")
        '+84987654321'
    """
    phone_number = v.strip()
    if not re.match(PHONE_NUMBER_PATTERN, phone_number):
        raise ValueError("Invalid phone number")
    return phone_number


def validate_token_format(v: str) -> str:
    """Validate opaque token format (hex string).

    Used for refresh, email verification and password reset tokens.

    Raises:
        ValueError: If token is empty or not hexadecimal.

    Example:
        >>> validate_token_format("abc123def456")
        'abc123def456'
        >>> validate_token_format("not-hex!")
        ValueError: Token must be hexadecimal
    """
    token = v.strip()
    if not token:
        raise ValueError("Token cannot be empty")
    if not re.match(r"^[a-fA-F0-9]+$", token):
        raise ValueError("Token must be hexadecimal")
    return token
