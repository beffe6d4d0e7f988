"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Registration, email verification, resend verification
- Login, token refresh, logout
- Password reset (request and confirm), password change
- Current user and access token queries

Each handler receives a unit of work bound to the request session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import (
    get_auth_config,
    get_email_service,
    get_logger,
    get_password_service,
    get_session_limiter,
    get_token_issuer,
    get_token_service,
    get_unit_of_work,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.change_password_handler import (
        ChangePasswordHandler,
    )
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.commands.handlers.resend_verification_email_handler import (
        ResendVerificationEmailHandler,
    )
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )
    from src.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )
    from src.application.queries.handlers.verify_access_token_handler import (
        VerifyAccessTokenHandler,
    )
    from src.domain.protocols.unit_of_work import UnitOfWorkProtocol


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_user_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "RegisterUserHandler":
    """Get RegisterUserHandler instance (request-scoped).

    Dependencies:
        - UnitOfWork (request-scoped)
        - PasswordService (app-scoped)
        - TokenIssuer (app-scoped)
        - EmailService (app-scoped)
        - Logger (app-scoped)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        uow=uow,
        password_service=get_password_service(),
        token_issuer=get_token_issuer(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_login_user_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "LoginUserHandler":
    """Get LoginUserHandler instance (request-scoped)."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler

    return LoginUserHandler(
        uow=uow,
        password_service=get_password_service(),
        token_issuer=get_token_issuer(),
        session_limiter=get_session_limiter(),
        config=get_auth_config(),
        logger=get_logger(),
    )


async def get_refresh_token_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessTokenHandler instance (request-scoped)."""
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )

    return RefreshAccessTokenHandler(
        uow=uow,
        token_issuer=get_token_issuer(),
        logger=get_logger(),
    )


async def get_logout_user_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "LogoutUserHandler":
    """Get LogoutUserHandler instance (request-scoped)."""
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler

    return LogoutUserHandler(uow=uow, logger=get_logger())


async def get_request_password_reset_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordResetHandler instance (request-scoped)."""
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )

    return RequestPasswordResetHandler(
        uow=uow,
        token_issuer=get_token_issuer(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_confirm_password_reset_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "ConfirmPasswordResetHandler":
    """Get ConfirmPasswordResetHandler instance (request-scoped)."""
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )

    return ConfirmPasswordResetHandler(
        uow=uow,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_verify_email_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "VerifyEmailHandler":
    """Get VerifyEmailHandler instance (request-scoped).

    Verification also logs the user in, so it needs the token issuer and
    the session limiter in addition to the email service.
    """
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )

    return VerifyEmailHandler(
        uow=uow,
        token_issuer=get_token_issuer(),
        session_limiter=get_session_limiter(),
        email_service=get_email_service(),
        config=get_auth_config(),
        logger=get_logger(),
    )


async def get_resend_verification_email_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "ResendVerificationEmailHandler":
    """Get ResendVerificationEmailHandler instance (request-scoped)."""
    from src.application.commands.handlers.resend_verification_email_handler import (
        ResendVerificationEmailHandler,
    )

    return ResendVerificationEmailHandler(
        uow=uow,
        token_issuer=get_token_issuer(),
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_change_password_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "ChangePasswordHandler":
    """Get ChangePasswordHandler instance (request-scoped)."""
    from src.application.commands.handlers.change_password_handler import (
        ChangePasswordHandler,
    )

    return ChangePasswordHandler(
        uow=uow,
        password_service=get_password_service(),
        logger=get_logger(),
    )


# ============================================================================
# Authentication Query Factories
# ============================================================================


async def get_current_user_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "GetCurrentUserHandler":
    """Get GetCurrentUserHandler instance (request-scoped)."""
    from src.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )

    return GetCurrentUserHandler(uow=uow, logger=get_logger())


async def get_verify_access_token_handler(
    uow: "UnitOfWorkProtocol" = Depends(get_unit_of_work),
) -> "VerifyAccessTokenHandler":
    """Get VerifyAccessTokenHandler instance (request-scoped)."""
    from src.application.queries.handlers.verify_access_token_handler import (
        VerifyAccessTokenHandler,
    )

    return VerifyAccessTokenHandler(
        uow=uow,
        token_service=get_token_service(),
        logger=get_logger(),
    )
