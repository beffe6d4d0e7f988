"""Admin API routers (ADMIN role required)."""

from src.presentation.routers.api.v1.admin.token_cleanups import router

__all__ = ["router"]
