"""Access token signing protocol for domain layer.

Token Strategy:
    - Access tokens: Short-lived signed JWT, validated statelessly, never stored
    - Refresh/verification/reset tokens: Opaque random strings (stored)
"""

from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 (PyJWT)
    """

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        issued_at: datetime,
        expires_at: datetime,
    ) -> str:
        """Generate a signed access token.

        Claims: ``sub`` (user id), ``email``, ``role``, ``iat``, ``exp``, ``jti``.

        Args:
            user_id: User's unique identifier.
            email: User's email address.
            role: User role value.
            issued_at: Written into ``iat``.
            expires_at: Written into ``exp``.

        Returns:
            JWT access token string.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate signature and expiry and return the decoded claims.

        Returns:
            Success with the payload, or Failure with an error message for
            expired, tampered or malformed tokens (never raises).
        """
        ...
