"""TokenRepository protocol for opaque token persistence.

Port (interface) for hexagonal architecture. Covers refresh, email
verification and password reset tokens, which share one table and differ
only by TokenType.

Consumption Semantics:
    ``deactivate`` is a conditional update (``WHERE id = ? AND is_active``)
    that reports whether this caller flipped the flag. Two concurrent
    consumers of one token therefore see exactly one True.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.token import Token
from src.domain.enums import TokenType


class TokenRepository(Protocol):
    """Token repository protocol (port).

    Methods:
        save: Insert a new token
        find_by_token: Look up a token by value and type
        deactivate: Conditionally deactivate one token
        deactivate_all_for_user: Deactivate every active token of a type
        list_active_for_user: Active tokens of a type, newest first
        deactivate_many: Deactivate a set of tokens by id
        delete_expired: Physically delete expired tokens
        delete_inactive_before: Physically delete stale inactive tokens
    """

    async def save(self, token: Token) -> None:
        """Insert a new token row."""
        ...

    async def find_by_token(self, token: str, token_type: TokenType) -> Token | None:
        """Find a token by its opaque value and type.

        Returns the row whatever its state. Callers check ``is_usable``.

        Args:
            token: Opaque token string presented by the client.
            token_type: Expected token purpose.

        Returns:
            Token if found, None otherwise.
        """
        ...

    async def deactivate(self, token_id: UUID, now: datetime) -> bool:
        """Deactivate a token only if it is still active.

        Args:
            token_id: Token's unique identifier.
            now: Revocation timestamp.

        Returns:
            True if this call deactivated the token (one affected row),
            False if it was already inactive or missing.
        """
        ...

    async def deactivate_all_for_user(
        self,
        user_id: UUID,
        token_type: TokenType,
        now: datetime,
    ) -> int:
        """Deactivate every active token of one type for a user.

        Returns:
            Number of tokens deactivated.
        """
        ...

    async def list_active_for_user(
        self,
        user_id: UUID,
        token_type: TokenType,
    ) -> list[Token]:
        """List active tokens ordered newest first (created_at desc, id desc)."""
        ...

    async def deactivate_many(self, token_ids: list[UUID], now: datetime) -> int:
        """Deactivate the given tokens that are still active.

        Returns:
            Number of tokens deactivated.
        """
        ...

    async def delete_expired(self, now: datetime) -> int:
        """Delete every token with ``expires_at < now``.

        Returns:
            Number of rows deleted.
        """
        ...

    async def delete_inactive_before(self, cutoff: datetime) -> int:
        """Delete inactive tokens last updated before ``cutoff``.

        Returns:
            Number of rows deleted.
        """
        ...
