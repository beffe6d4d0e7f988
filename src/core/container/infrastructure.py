"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Settings and the derived AuthConfig
- Database (PostgreSQL)
- Password hashing (bcrypt)
- Token generation (JWT) and token issuing
- Email (stub)
- Logging (structlog console)

Plus the request-scoped database session and unit of work.
"""

from collections.abc import Callable
from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import AuthConfig, get_settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.application.services.session_limiter import SessionLimiter
    from src.domain.protocols.email_protocol import EmailProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
    from src.domain.protocols.unit_of_work import UnitOfWorkProtocol
    from src.infrastructure.security.token_issuer import TokenIssuer


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_auth_config() -> AuthConfig:
    """Get the immutable auth configuration (app-scoped)."""
    return AuthConfig.from_settings(get_settings())


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get structured logger singleton (app-scoped).

    Console renderer in development, JSON when LOG_JSON is set or in
    production.
    """
    from src.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.log_json or settings.is_production,
        level=settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped)."""
    from src.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_token_issuer() -> "TokenIssuer":
    from src.infrastructure.security import TokenIssuer

    return TokenIssuer(token_service=get_token_service(), config=get_auth_config())


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Every environment currently uses StubEmailService (structured log output).
    """
    from src.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger(), base_url=get_settings().api_base_url)


@lru_cache()
def get_session_limiter() -> "SessionLimiter":
    from src.application.services.session_limiter import SessionLimiter

    return SessionLimiter(logger=get_logger())


def get_uow_factory() -> Callable[[], "UnitOfWorkProtocol"]:
    """Factory of self-contained units of work (background jobs).

    Each call opens a new session that is closed when the unit of work exits.
    """
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    db = get_database()

    def factory() -> "UnitOfWorkProtocol":
        return SqlAlchemyUnitOfWork(db.async_session(), close_on_exit=True)

    return factory


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    The session is closed when the request ends. Commits are issued by the
    unit of work inside handlers.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


async def get_unit_of_work(
    session: AsyncSession = Depends(get_db_session),
) -> "UnitOfWorkProtocol":
    """Get unit of work bound to the request session (request-scoped)."""
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return SqlAlchemyUnitOfWork(session)
