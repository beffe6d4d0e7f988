"""Authentication queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. Queries NEVER
change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """Get the authenticated user's profile.

    Attributes:
        user_id: Subject of the presented access token.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class VerifyAccessToken:
    """Check an access token and confirm its subject can still sign in.

    Attributes:
        access_token: Raw JWT (without the "Bearer " prefix).
    """

    access_token: str
