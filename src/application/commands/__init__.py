"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, ChangePassword).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import (
    ChangePassword,
    ConfirmPasswordReset,
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
    ResendVerificationEmail,
    VerifyEmail,
)

__all__ = [
    "ChangePassword",
    "ConfirmPasswordReset",
    "LoginUser",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RequestPasswordReset",
    "ResendVerificationEmail",
    "VerifyEmail",
]
