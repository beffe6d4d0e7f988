"""Token issuer.

Produces the two token families the service hands out:

- Access tokens: signed JWTs from TokenGenerationProtocol, never stored.
- Opaque tokens: 32 random bytes as 64 hex characters, stored in the
  token table with a per-type lifetime.

Architecture:
    - Infrastructure service (no protocol needed)
    - Used by application handlers directly
    - Tokens stored in plain text (already unguessable, 2^256 possibilities)
"""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from src.core.config import AuthConfig
from src.domain.entities.token import Token
from src.domain.entities.user import User
from src.domain.enums import TokenType
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

TOKEN_BYTES = 32


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuedTokens:
    """Access/refresh pair returned by login, refresh and email verification.

    Attributes:
        access_token: Signed JWT.
        refresh_token: Persisted refresh token row (value in ``.token``).
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: Token
    expires_in: int


class TokenIssuer:
    """Issues access tokens and opaque tokens.

    Usage:
        issuer = TokenIssuer(token_service=jwt_service, config=auth_config)
        issued = issuer.issue_pair(user, now)
        await uow.tokens.save(issued.refresh_token)
    """

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        config: AuthConfig,
    ) -> None:
        self._token_service = token_service
        self._config = config

    @staticmethod
    def generate_opaque_token() -> str:
        """Generate a 64-character hex token (32 bytes of entropy)."""
        return secrets.token_hex(TOKEN_BYTES)

    def lifetime_for(self, token_type: TokenType) -> timedelta:
        """Configured lifetime for each opaque token type."""
        match token_type:
            case TokenType.REFRESH_TOKEN:
                return timedelta(days=self._config.refresh_token_expire_days)
            case TokenType.EMAIL_VERIFICATION:
                return timedelta(hours=self._config.email_verification_expire_hours)
            case TokenType.PASSWORD_RESET:
                return timedelta(hours=self._config.password_reset_expire_hours)

    def new_token(self, user_id: UUID, token_type: TokenType, now: datetime) -> Token:
        """Build an active, not yet persisted opaque token for a user."""
        return Token(
            id=uuid7(),
            user_id=user_id,
            token=self.generate_opaque_token(),
            type=token_type,
            expires_at=now + self.lifetime_for(token_type),
            created_at=now,
            updated_at=now,
        )

    def issue_access_token(self, user: User, now: datetime) -> str:
        return self._token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            issued_at=now,
            expires_at=now + timedelta(minutes=self._config.access_token_expire_minutes),
        )

    def issue_pair(self, user: User, now: datetime) -> IssuedTokens:
        """Issue an access token and a new refresh token for ``user``.

        The refresh token is returned unsaved. Callers persist it inside
        their unit of work.
        """
        return IssuedTokens(
            access_token=self.issue_access_token(user, now),
            refresh_token=self.new_token(user.id, TokenType.REFRESH_TOKEN, now),
            expires_in=self._config.access_token_expire_minutes * 60,
        )
