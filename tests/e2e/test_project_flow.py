"""End-to-end tests for projects, likes, comments and profile privacy."""

from uuid import uuid4

import pytest

from tests.conftest import api_register, auth_header
from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


@pytest.fixture
def owner(client):
    return api_register(client, "maker")


@pytest.fixture
def fan(client):
    return api_register(client, "fan")


def create_project(client, token: str, **fields) -> dict:
    payload = {"title": "Weather Station", "tags": ["IoT", "python"], **fields}
    response = client.post("/projects", json=payload, headers=auth_header(token))
    assert response.status_code == 201, response.text
    return response.json()


class TestProjects:
    """Creating, reading and editing projects."""

    def test_create_derives_slug_and_normalizes_tags(self, client, owner):
        project = create_project(client, owner["token"])

        assert project["slug"] == "weather-station"
        assert project["tags"] == ["iot", "python"]
        assert project["ownerId"] == owner["user"]["id"]

    def test_anonymous_can_read_public_project(self, client, owner):
        project = create_project(client, owner["token"])

        response = client.get(f"/projects/{project['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["project"]["title"] == "Weather Station"
        assert body["likedByMe"] is False
        assert body["canEdit"] is False

    def test_only_owner_can_edit(self, client, owner, fan):
        project = create_project(client, owner["token"])

        denied = client.put(
            f"/projects/{project['id']}",
            json={"title": "Hijacked"},
            headers=auth_header(fan["token"]),
        )
        updated = client.put(
            f"/projects/{project['id']}",
            json={"title": "Weather Station v2"},
            headers=auth_header(owner["token"]),
        )

        assert denied.status_code == 403
        assert updated.status_code == 200
        assert updated.json()["title"] == "Weather Station v2"

    def test_create_requires_auth(self, client):
        response = client.post("/projects", json={"title": "Nope"})

        assert response.status_code == 401

    def test_missing_title_is_a_bad_request(self, client, owner):
        response = client.post(
            "/projects", json={"tags": []}, headers=auth_header(owner["token"])
        )

        assert response.status_code == 400
        assert "title" in response.json()["error"]

    def test_missing_project_is_not_found(self, client):
        response = client.get(f"/projects/{uuid4()}")

        assert response.status_code == 404
        body = response.json()
        assert "error" in body
        assert "stack" not in body


class TestLikes:
    """Liking and unliking."""

    def test_like_returns_count(self, client, owner, fan):
        project = create_project(client, owner["token"])

        response = client.post(
            f"/projects/{project['id']}/like", headers=auth_header(fan["token"])
        )

        assert response.status_code == 200
        assert response.json() == {"liked": True, "likesCount": 1}

    def test_second_like_is_rejected(self, client, owner, fan):
        project = create_project(client, owner["token"])
        client.post(f"/projects/{project['id']}/like", headers=auth_header(fan["token"]))

        response = client.post(
            f"/projects/{project['id']}/like", headers=auth_header(fan["token"])
        )

        assert response.status_code == 400

    def test_unlike(self, client, owner, fan):
        project = create_project(client, owner["token"])
        client.post(f"/projects/{project['id']}/like", headers=auth_header(fan["token"]))

        response = client.delete(
            f"/projects/{project['id']}/like", headers=auth_header(fan["token"])
        )

        assert response.json() == {"liked": False, "likesCount": 0}


class TestComments:
    """Commenting on projects."""

    def test_comment_shows_on_project(self, client, owner, fan):
        project = create_project(client, owner["token"])

        created = client.post(
            f"/projects/{project['id']}/comments",
            json={"text": "Nice build"},
            headers=auth_header(fan["token"]),
        )
        detail = client.get(f"/projects/{project['id']}").json()

        assert created.status_code == 201
        assert [c["text"] for c in detail["comments"]] == ["Nice build"]


class TestProfilePrivacy:
    """Profile pages of private accounts."""

    def test_private_profile_hides_projects(self, client, owner, fan):
        create_project(client, owner["token"])
        privacy = client.put(
            "/follow/privacy",
            json={"isPrivate": True},
            headers=auth_header(owner["token"]),
        )

        anonymous = client.get("/users/maker")
        stranger = client.get("/users/maker", headers=auth_header(fan["token"]))

        assert privacy.status_code == 200
        assert anonymous.status_code == 200
        assert anonymous.json()["projects"] == []
        assert stranger.json()["projects"] == []
        assert stranger.json()["relationship"]["followAction"] == "request"

    def test_accepted_follower_sees_projects(self, client, owner, fan):
        create_project(client, owner["token"])
        client.put(
            "/follow/privacy",
            json={"isPrivate": True},
            headers=auth_header(owner["token"]),
        )

        requested = client.post(
            f"/follow/{owner['user']['id']}/follow",
            headers=auth_header(fan["token"]),
        )
        accepted = client.post(
            f"/follow/{fan['user']['id']}/accept-request",
            headers=auth_header(owner["token"]),
        )
        profile = client.get("/users/maker", headers=auth_header(fan["token"]))

        assert requested.json()["status"] == "pending"
        assert accepted.status_code == 200
        assert [p["title"] for p in profile.json()["projects"]] == ["Weather Station"]
        assert profile.json()["relationship"]["isFollowing"] is True
