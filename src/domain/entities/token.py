"""Opaque token domain entity.

One row per issued refresh, email verification or password reset token.
A token is consumed by deactivating it in the same transaction as its
effect. Expired tokens are unusable whatever their ``is_active`` flag says.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import TokenType


@dataclass
class Token:
    """Persisted opaque token.

    Attributes:
        id: Unique token identifier
        user_id: Owning user
        token: Opaque random string presented by the client
        type: Token purpose
        expires_at: Absolute expiry (UTC)
        is_active: False once consumed or revoked
        revoked_at: When the token was deactivated (None while active)
        created_at: Issue time, used to order sessions newest-first
        updated_at: Last state change, used by the stale-inactive sweep
    """

    id: UUID
    user_id: UUID
    token: str
    type: TokenType
    expires_at: datetime
    created_at: datetime
    updated_at: datetime
    is_active: bool = True
    revoked_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def is_usable(self, now: datetime) -> bool:
        """Active and not yet expired."""
        return self.is_active and not self.is_expired(now)
