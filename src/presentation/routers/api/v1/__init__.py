"""API v1 routers.

RESTful resource-based endpoints.

Resources:
    /api/v1/users                  - Registration, current user, password change
    /api/v1/sessions               - Login / logout
    /api/v1/tokens                 - Token refresh
    /api/v1/token-verifications    - Access token verification
    /api/v1/email-verifications    - Email verification
    /api/v1/verification-emails    - Resend verification email
    /api/v1/password-reset-tokens  - Password reset requests
    /api/v1/password-resets        - Password reset execution

Admin Resources:
    /api/v1/admin/token-cleanups   - Forced token cleanup
"""

from fastapi import APIRouter

from src.core.config import get_settings
from src.presentation.routers.api.v1 import (
    email_verifications,
    password_resets,
    sessions,
    tokens,
    users,
)
from src.presentation.routers.api.v1.admin import router as admin_router

v1_router = APIRouter(prefix=get_settings().api_v1_prefix)
v1_router.include_router(users.router)
v1_router.include_router(sessions.router)
v1_router.include_router(tokens.router)
v1_router.include_router(email_verifications.router)
v1_router.include_router(password_resets.router)
v1_router.include_router(admin_router)

__all__ = [
    "v1_router",
]
