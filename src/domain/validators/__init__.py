"""Validators package exports."""

from src.domain.validators.functions import (
    normalize_email,
    validate_email,
    validate_full_name,
    validate_phone_number,
    validate_strong_password,
    validate_token_format,
)

__all__ = [
    "normalize_email",
    "validate_email",
    "validate_full_name",
    "validate_phone_number",
    "validate_strong_password",
    "validate_token_format",
]
