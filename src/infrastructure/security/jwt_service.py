"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HS256 algorithm, secret of at least 32 bytes
    - Unique JWT ID (jti) per token
    - Stateless validation (no database lookup)
"""

from datetime import datetime
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthErrorMessage


class JWTService:
    """JWT access token generation and validation service.

    Usage:
        service = JWTService(secret_key=settings.secret_key)
        token = service.generate_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            issued_at=now,
            expires_at=now + timedelta(minutes=60),
        )
        result = service.validate_access_token(token)
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing (at least 32 bytes).
            algorithm: Signing algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        issued_at: datetime,
        expires_at: datetime,
    ) -> str:
        """Generate JWT access token.

        Example:
            >>> token = service.generate_access_token(...)
            >>> len(token.split("."))
            3
        """
        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        PyJWT checks the signature and the ``exp`` claim. ``sub`` and ``exp``
        are required.

        Returns:
            Success with the decoded claims, or Failure with an error message.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
            return Success(value=payload)

        except InvalidTokenError:
            return Failure(error=AuthErrorMessage.INVALID_ACCESS_TOKEN)
