"""Smoke tests reuse the API fixtures (in-memory unit of work)."""

from tests.api.conftest import (  # noqa: F401
    admin,
    api_store,
    auth_headers,
    client,
    create_user,
)
