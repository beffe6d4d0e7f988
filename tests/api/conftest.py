"""API test fixtures.

The app runs with its real handlers, password hashing (bcrypt at cost 4)
and JWT service. Only the unit of work is replaced: every request gets an
InMemoryUnitOfWork over the test's store. The lifespan is not entered, so
no scheduler starts and no database connection is opened.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from src.application.services.token_cleanup_service import TokenCleanupService
from src.core.config import AuthConfig
from src.core.container import (
    get_password_service,
    get_token_cleanup_scheduler,
    get_token_issuer,
    get_unit_of_work,
)
from src.domain.enums import UserRole
from src.infrastructure.jobs.token_cleanup_scheduler import TokenCleanupScheduler
from src.main import app
from tests.utils.factories import make_user
from tests.utils.in_memory import InMemoryStore, InMemoryUnitOfWork

API = "/api/v1"


@pytest.fixture
def api_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(api_store):
    app.dependency_overrides[get_unit_of_work] = lambda: InMemoryUnitOfWork(api_store)
    app.dependency_overrides[get_token_cleanup_scheduler] = lambda: TokenCleanupScheduler(
        TokenCleanupService(
            uow_factory=lambda: InMemoryUnitOfWork(api_store),
            config=AuthConfig(),
            logger=Mock(),
        ),
        AuthConfig(),
        Mock(),
        scheduler=Mock(),
    )
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(api_store):
    """Store a user whose bcrypt hash matches ``password``."""

    def _create(**kwargs):
        kwargs.setdefault("hasher", get_password_service())
        return api_store.add_user(make_user(**kwargs))

    return _create


@pytest.fixture
def auth_headers():
    """Bearer header with a freshly issued access token for ``user``."""
    from datetime import UTC, datetime

    def _headers(user) -> dict[str, str]:
        token = get_token_issuer().issue_access_token(user, datetime.now(UTC))
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin(create_user):
    return create_user(
        email="admin@example.com", phone_number="+10000000000", role=UserRole.ADMIN
    )
