"""Domain enums for business logic.

Available Enums:
    - UserRole: Storefront roles (customer, admin)
    - TokenType: Purpose of a persisted opaque token
"""

from src.domain.enums.token_type import TokenType
from src.domain.enums.user_role import UserRole

__all__ = [
    "TokenType",
    "UserRole",
]
