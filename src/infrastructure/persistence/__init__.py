"""Database persistence infrastructure.

- Base model for all database entities
- Database connection and session management
- Repository implementations and the unit of work that binds them
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "BaseModel",
    "Database",
    "SqlAlchemyUnitOfWork",
]
