"""API tests for the users resource.

Tests cover:
- POST /api/v1/users (registration, validation, conflicts)
- GET /api/v1/users/me (authentication required)
- PATCH /api/v1/users/me/password (password change revokes sessions)
"""

import pytest

from src.domain.enums import TokenType
from tests.api.conftest import API
from tests.utils.factories import DEFAULT_PASSWORD, make_token

REGISTRATION = {
    "full_name": "Jane Doe",
    "email": "Jane@Example.com",
    "password": DEFAULT_PASSWORD,
    "phone_number": "+84987654321",
}


@pytest.mark.api
class TestCreateUser:
    def test_register_returns_201_without_tokens(self, client, api_store):
        """Test registration creates an unverified user and no session."""
        # Act
        response = client.post(f"{API}/users", json=REGISTRATION)

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["requires_email_verification"] is True
        assert body["user"]["email"] == "jane@example.com"
        assert body["user"]["is_email_verified"] is False
        assert body["user"]["role"] == "customer"
        assert "access_token" not in body
        assert "password_hash" not in body["user"]
        assert len(api_store.users) == 1

    def test_duplicate_email_returns_409(self, client, create_user):
        # Arrange
        create_user(email="jane@example.com", phone_number="+10000000007")

        # Act
        response = client.post(f"{API}/users", json=REGISTRATION)

        # Assert
        assert response.status_code == 409
        body = response.json()
        assert body["status"] == 409
        assert body["code"] == "email_already_exists"
        assert body["errors"][0]["field"] == "email"
        assert response.headers["content-type"].startswith("application/json")

    def test_duplicate_phone_returns_409(self, client, create_user):
        create_user(email="other@example.com", phone_number="+84987654321")

        response = client.post(f"{API}/users", json=REGISTRATION)

        assert response.status_code == 409
        assert response.json()["code"] == "phone_number_already_exists"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("password", "weakpass"),
            ("email", "not-an-email"),
            ("phone_number", "12ab"),
            ("full_name", "   "),
        ],
    )
    def test_invalid_field_returns_422(self, client, api_store, field, value):
        """Test field validation fails before the handler runs."""
        # Act
        response = client.post(f"{API}/users", json={**REGISTRATION, field: value})

        # Assert
        assert response.status_code == 422
        body = response.json()
        assert body["type"].endswith("/errors/validation-failed")
        assert any(e["field"] == field for e in body["errors"])
        assert api_store.users == {}


@pytest.mark.api
class TestGetMe:
    def test_requires_token(self, client):
        response = client.get(f"{API}/users/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["detail"] == "Not authenticated"

    def test_rejects_garbage_token(self, client):
        response = client.get(
            f"{API}/users/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_returns_profile(self, client, create_user, auth_headers):
        user = create_user()

        response = client.get(f"{API}/users/me", headers=auth_headers(user))

        assert response.status_code == 200
        assert response.json()["id"] == str(user.id)
        assert response.json()["email"] == user.email

    def test_deactivated_user_rejected(self, client, create_user, auth_headers):
        """Test a still-valid JWT of a deactivated user is refused."""
        user = create_user(is_active=False)

        response = client.get(f"{API}/users/me", headers=auth_headers(user))

        assert response.status_code == 401


@pytest.mark.api
class TestChangePassword:
    def test_change_password_revokes_sessions(
        self, client, create_user, auth_headers, api_store
    ):
        # Arrange
        user = create_user()
        session = api_store.add_token(make_token(user.id))

        # Act
        response = client.patch(
            f"{API}/users/me/password",
            json={"current_password": DEFAULT_PASSWORD, "new_password": "BrandNew456!"},
            headers=auth_headers(user),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == "Password changed successfully."
        assert api_store.tokens[session.id].is_active is False
        login = client.post(
            f"{API}/sessions",
            json={"email": user.email, "password": "BrandNew456!"},
        )
        assert login.status_code == 201

    def test_wrong_current_password_returns_401(
        self, client, create_user, auth_headers, api_store
    ):
        user = create_user()

        response = client.patch(
            f"{API}/users/me/password",
            json={"current_password": "Wrong123!", "new_password": "BrandNew456!"},
            headers=auth_headers(user),
        )

        assert response.status_code == 401
        assert response.json()["code"] == "current_password_mismatch"
        assert api_store.active_tokens_for(user.id, TokenType.REFRESH_TOKEN) == []

    def test_weak_new_password_returns_422(self, client, create_user, auth_headers):
        user = create_user()

        response = client.patch(
            f"{API}/users/me/password",
            json={"current_password": DEFAULT_PASSWORD, "new_password": "short"},
            headers=auth_headers(user),
        )

        assert response.status_code == 422
