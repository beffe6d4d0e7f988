"""Kinds of opaque tokens stored in the token table.

Only opaque tokens are persisted. Access tokens are signed JWTs validated
statelessly and never stored.
"""

from enum import Enum


class TokenType(str, Enum):
    """Opaque token purpose."""

    EMAIL_VERIFICATION = "email_verification"
    PASSWORD_RESET = "password_reset"
    REFRESH_TOKEN = "refresh_token"
