"""Domain errors package.

Usage:
    from src.domain.errors import AuthErrorMessage
"""

from src.domain.errors.authentication_error import AuthErrorMessage

__all__ = [
    "AuthErrorMessage",
]
