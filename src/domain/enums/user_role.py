"""User roles carried in access-token claims.

Usage:
    from src.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Storefront user roles.

    String Enum:
        Inherits from str so the value serializes directly into JWT claims
        and the ``users.role`` column.
    """

    CUSTOMER = "customer"
    """Default role assigned at registration."""

    ADMIN = "admin"
    """Back-office operator."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings."""
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role."""
        return value in cls.values()
