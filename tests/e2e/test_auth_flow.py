"""End-to-end tests for authentication flow."""

from tests.conftest import (
    DEFAULT_PASSWORD,
    api_register,
    auth_header,
    promote_to_admin,
)
from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


class TestAuthFlow:
    """End-to-end tests for password authentication."""

    def test_register_returns_token_and_profile(self, client):
        """Should create the account and sign it in."""
        # Act
        body = api_register(client, "alice")

        # Assert
        assert body["token"]
        assert body["user"]["username"] == "alice"
        assert body["user"]["email"] == "alice@example.com"
        assert body["user"]["isAdmin"] is False
        assert body["user"]["privacy"]["isPrivate"] is False

    def test_duplicate_username_is_rejected(self, client):
        api_register(client, "alice")

        response = client.post(
            "/auth/register",
            json={
                "username": "alice",
                "email": "other@example.com",
                "name": "Other",
                "password": DEFAULT_PASSWORD,
            },
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_login_with_email_or_username(self, client):
        api_register(client, "alice")

        by_email = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": DEFAULT_PASSWORD},
        )
        by_username = client.post(
            "/auth/login",
            json={"username": "alice", "password": DEFAULT_PASSWORD},
        )

        assert by_email.status_code == 200
        assert by_username.status_code == 200
        assert by_email.json()["user"]["id"] == by_username.json()["user"]["id"]

    def test_login_with_wrong_password(self, client):
        api_register(client, "alice")

        response = client.post(
            "/auth/login", json={"identifier": "alice", "password": "not-it"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"

    def test_me_returns_current_user(self, client):
        token = api_register(client, "alice")["token"]

        response = client.get("/auth/me", headers=auth_header(token))

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_me_without_token(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    def test_me_with_garbage_token(self, client):
        response = client.get("/auth/me", headers=auth_header("not-a-jwt"))

        assert response.status_code == 401

    def test_banned_user_cannot_login(self, client):
        """A ban blocks login with the account state and reason, and no token."""
        admin = api_register(client, "admin")
        promote_to_admin(client, admin["user"]["id"])
        target = api_register(client, "spammer")

        ban = client.post(
            f"/admin/users/{target['user']['id']}/ban",
            json={"reason": "Spam links"},
            headers=auth_header(admin["token"]),
        )
        login = client.post(
            "/auth/login",
            json={"identifier": "spammer", "password": DEFAULT_PASSWORD},
        )
        stale_token = client.get("/auth/me", headers=auth_header(target["token"]))

        assert ban.status_code == 200
        assert login.status_code == 403
        body = login.json()
        assert body["type"] == "ACCOUNT_BANNED"
        assert body["reason"] == "Spam links"
        assert "token" not in body
        assert stale_token.status_code == 403

    def test_non_admin_cannot_ban(self, client):
        user = api_register(client, "alice")
        target = api_register(client, "bob")

        response = client.post(
            f"/admin/users/{target['user']['id']}/ban",
            json={"reason": "No reason"},
            headers=auth_header(user["token"]),
        )

        assert response.status_code == 403
