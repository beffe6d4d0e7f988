"""
Main FastAPI application entry point.

Builds the FastAPI application: trace middleware, RFC 7807 exception
handlers, the system and v1 routers, and a lifespan that runs the token
cleanup scheduler and disposes the database engine on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import get_settings
from src.core.container import get_database, get_logger, get_token_cleanup_scheduler
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: start the token cleanup scheduler (when enabled)
    - Shutdown: stop the scheduler, dispose database connections

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    settings = get_settings()
    logger = get_logger()
    scheduler = get_token_cleanup_scheduler() if settings.cleanup_enabled else None

    if scheduler is not None:
        scheduler.start()
    logger.info(
        "Application started",
        environment=settings.environment.value,
        cleanup_enabled=settings.cleanup_enabled,
    )

    yield

    if scheduler is not None:
        scheduler.shutdown()
    await get_database().close()
    logger.info("Application stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application from current settings."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Storefront credential and session-token lifecycle service",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Request correlation
    app.add_middleware(TraceMiddleware)

    # RFC 7807 error responses
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(v1_router)
    return app


app = create_app()
