"""End-to-end authentication journeys through the HTTP API.

Journeys:
- Register, blocked login, verify email, log in, refresh, log out
- Session limit: the oldest session is revoked on the N+1th login
- Password reset revokes every session and the old password
- Forced cleanup removes consumed tokens past retention
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.core.config import get_settings
from src.domain.enums import TokenType
from tests.api.conftest import API

EMAIL = "journey@example.com"
PASSWORD = "JourneyPass123!"


def _register_and_verify(client, api_store):
    client.post(
        f"{API}/users",
        json={
            "full_name": "Journey User",
            "email": EMAIL,
            "password": PASSWORD,
            "phone_number": "+84911111111",
        },
    )
    user_id = next(iter(api_store.users))
    token = api_store.active_tokens_for(user_id, TokenType.EMAIL_VERIFICATION)[0]
    client.post(f"{API}/email-verifications", json={"token": token.token})
    return user_id


def _login(client, password=PASSWORD):
    return client.post(f"{API}/sessions", json={"email": EMAIL, "password": password})


@pytest.mark.smoke
class TestRegistrationJourney:
    def test_register_verify_login_refresh_logout(self, client, api_store):
        """Test the full lifecycle of one account."""
        # Register: no tokens yet, login blocked
        created = client.post(
            f"{API}/users",
            json={
                "full_name": "Journey User",
                "email": EMAIL,
                "password": PASSWORD,
                "phone_number": "+84911111111",
            },
        )
        assert created.status_code == 201
        user_id = created.json()["user"]["id"]
        blocked = _login(client)
        assert blocked.status_code == 401
        assert blocked.json()["code"] == "email_not_verified"

        # Verify email: logged in immediately
        stored_id = next(iter(api_store.users))
        token = api_store.active_tokens_for(stored_id, TokenType.EMAIL_VERIFICATION)[0]
        verified = client.post(f"{API}/email-verifications", json={"token": token.token})
        assert verified.status_code == 201
        assert verified.json()["user"]["id"] == user_id

        # Login and look at the profile
        login = _login(client)
        assert login.status_code == 201
        tokens = login.json()
        me = client.get(
            f"{API}/users/me",
            headers={"Authorization": f"Bearer {tokens['access_token']}"},
        )
        assert me.json()["is_email_verified"] is True

        # Refresh rotates, the old refresh token is dead
        refreshed = client.post(
            f"{API}/tokens", json={"refresh_token": tokens["refresh_token"]}
        )
        assert refreshed.status_code == 201
        replay = client.post(
            f"{API}/tokens", json={"refresh_token": tokens["refresh_token"]}
        )
        assert replay.status_code == 401

        # Logout revokes the verification session and the rotated one
        logout = client.delete(
            f"{API}/sessions",
            headers={"Authorization": f"Bearer {refreshed.json()['access_token']}"},
        )
        assert logout.json()["revoked_count"] == 2
        after = client.post(
            f"{API}/tokens", json={"refresh_token": refreshed.json()["refresh_token"]}
        )
        assert after.status_code == 401


@pytest.mark.smoke
class TestSessionLimitJourney:
    def test_oldest_session_revoked_after_limit(self, client, api_store):
        # Arrange
        user_id = _register_and_verify(client, api_store)
        max_sessions = get_settings().max_sessions

        # Act
        logins = [_login(client).json() for _ in range(max_sessions)]

        # Assert
        active = api_store.active_tokens_for(user_id, TokenType.REFRESH_TOKEN)
        assert len(active) == max_sessions
        oldest = logins[0]["refresh_token"]
        assert oldest in {t.token for t in active}
        assert client.post(
            f"{API}/tokens", json={"refresh_token": oldest}
        ).status_code == 201
        # Revoked: the verification session (limit) and the refreshed one
        revoked = [
            t
            for t in api_store.tokens_for(user_id, TokenType.REFRESH_TOKEN)
            if not t.is_active
        ]
        assert len(revoked) == 2


@pytest.mark.smoke
class TestPasswordResetJourney:
    def test_reset_revokes_sessions_and_old_password(self, client, api_store):
        # Arrange
        user_id = _register_and_verify(client, api_store)
        session = _login(client).json()

        # Act
        requested = client.post(f"{API}/password-reset-tokens", json={"email": EMAIL})
        reset = api_store.active_tokens_for(user_id, TokenType.PASSWORD_RESET)[0]
        confirmed = client.post(
            f"{API}/password-resets",
            json={"token": reset.token, "new_password": "AfterReset789!"},
        )

        # Assert
        assert requested.status_code == 202
        assert confirmed.status_code == 200
        assert api_store.active_tokens_for(user_id, TokenType.REFRESH_TOKEN) == []
        assert client.post(
            f"{API}/tokens", json={"refresh_token": session["refresh_token"]}
        ).status_code == 401
        assert _login(client).status_code == 401
        assert _login(client, "AfterReset789!").status_code == 201
        assert client.post(
            f"{API}/password-resets",
            json={"token": reset.token, "new_password": "SecondTry789!"},
        ).status_code == 401


@pytest.mark.smoke
class TestCleanupJourney:
    def test_forced_cleanup_removes_old_consumed_tokens(
        self, client, api_store, admin, auth_headers
    ):
        """Test consumed tokens older than the forced retention are purged."""
        # Arrange
        user_id = _register_and_verify(client, api_store)
        session = _login(client).json()
        client.post(f"{API}/tokens", json={"refresh_token": session["refresh_token"]})
        consumed = [
            t for t in api_store.tokens_for(user_id) if not t.is_active
        ]
        stale = datetime.now(UTC) - timedelta(days=8)
        for token in consumed:
            api_store.tokens[token.id].updated_at = stale

        # Act
        response = client.post(f"{API}/admin/token-cleanups", headers=auth_headers(admin))

        # Assert
        assert response.status_code == 200
        assert response.json() == {"expired": 0, "inactive": len(consumed)}
        remaining = api_store.tokens_for(user_id)
        assert remaining
        assert all(t.is_active for t in remaining)
