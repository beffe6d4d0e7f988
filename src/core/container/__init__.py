"""Container module - Centralized dependency injection.

Re-exports every factory function so callers import from one place:

    from src.core.container import get_logger, get_login_user_handler

Organized into modules:
- infrastructure: Core services (settings, db, logging, security, email)
- auth_handlers: Authentication command and query handler factories
- jobs: Token cleanup service and scheduler

Application-scoped factories are cached with ``@lru_cache``. Request-scoped
factories are FastAPI dependencies built on ``get_db_session()``.
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_auth_config,
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_session_limiter,
    get_token_issuer,
    get_token_service,
    get_unit_of_work,
    get_uow_factory,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_change_password_handler,
    get_confirm_password_reset_handler,
    get_current_user_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_resend_verification_email_handler,
    get_verify_access_token_handler,
    get_verify_email_handler,
)

# Background jobs
from src.core.container.jobs import (
    get_token_cleanup_scheduler,
    get_token_cleanup_service,
)

__all__ = [
    # Infrastructure
    "get_auth_config",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_session_limiter",
    "get_token_issuer",
    "get_token_service",
    "get_unit_of_work",
    "get_uow_factory",
    # Auth handlers
    "get_change_password_handler",
    "get_confirm_password_reset_handler",
    "get_current_user_handler",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_refresh_token_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_resend_verification_email_handler",
    "get_verify_access_token_handler",
    "get_verify_email_handler",
    # Jobs
    "get_token_cleanup_scheduler",
    "get_token_cleanup_service",
]
