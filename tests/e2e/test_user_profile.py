"""End-to-end tests for user profile endpoints."""

from tests.conftest import api_register, auth_header
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestUserProfileEndpoints:
    """End-to-end tests for user profile API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_get_nonexistent_user_profile(self, client):
        """Should return 404 for nonexistent user."""
        # Act
        response = client.get("/users/nobody_here")

        # Assert
        assert response.status_code == 404
        assert "error" in response.json()

    def test_get_profile_anonymously(self, client):
        api_register(client, "maker")

        response = client.get("/users/maker")

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["username"] == "maker"
        assert data["user"]["isPrivate"] is False
        assert data["projects"] == []
        assert data["relationship"]["isOwnProfile"] is False

    def test_own_profile_is_flagged(self, client):
        token = api_register(client, "maker")["token"]

        response = client.get("/users/maker", headers=auth_header(token))

        assert response.status_code == 200
        assert response.json()["relationship"]["isOwnProfile"] is True

    def test_search_users(self, client):
        for username in ("maker_a", "maker_b", "painter"):
            api_register(client, username)

        response = client.get("/users/search", params={"q": "maker", "limit": 1})

        assert response.status_code == 200
        data = response.json()
        assert [u["username"] for u in data["users"]] == ["maker_a"]
        assert data["pagination"] == {"page": 1, "limit": 1, "total": 2}
