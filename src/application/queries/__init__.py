"""Queries - Read operations that never change state."""

from src.application.queries.auth_queries import GetCurrentUser, VerifyAccessToken

__all__ = [
    "GetCurrentUser",
    "VerifyAccessToken",
]
