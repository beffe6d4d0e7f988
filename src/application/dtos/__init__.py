"""Application DTOs returned by handlers."""

from src.application.dtos.auth_dtos import (
    AccessTokenInfo,
    AuthResult,
    CleanupReport,
    LogoutResult,
    RegistrationResult,
    UserView,
)

__all__ = [
    "AccessTokenInfo",
    "AuthResult",
    "CleanupReport",
    "LogoutResult",
    "RegistrationResult",
    "UserView",
]
