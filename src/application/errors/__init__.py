"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    conflict, unauthorized, user_not_found, execution_failed: Error factories
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from src.application.errors.failures import (
    conflict,
    execution_failed,
    unauthorized,
    user_not_found,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "conflict",
    "execution_failed",
    "unauthorized",
    "user_not_found",
]
