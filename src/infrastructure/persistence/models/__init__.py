"""Database models.

Importing this package registers every table on BaseModel.metadata
(used by Alembic autogenerate and Database.create_all).
"""

from src.infrastructure.persistence.models.token import TokenModel
from src.infrastructure.persistence.models.user import UserModel

__all__ = [
    "TokenModel",
    "UserModel",
]
