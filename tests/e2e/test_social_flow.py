"""End-to-end tests for following, notifications and rankings."""

import pytest

from tests.conftest import api_register, auth_header
from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


@pytest.fixture
def alice(client):
    return api_register(client, "alice")


@pytest.fixture
def bob(client):
    return api_register(client, "bob")


class TestFollow:
    """Follow, follow requests and blocks over HTTP."""

    def test_follow_public_user_notifies(self, client, alice, bob):
        response = client.post(
            f"/follow/{bob['user']['id']}/follow", headers=auth_header(alice["token"])
        )
        followers = client.get(f"/follow/{bob['user']['id']}/followers")
        inbox = client.get("/notifications", headers=auth_header(bob["token"]))

        assert response.status_code == 200
        assert response.json()["status"] == "following"
        assert [u["username"] for u in followers.json()["users"]] == ["alice"]
        assert inbox.json()["unreadCount"] == 1
        assert inbox.json()["notifications"][0]["type"] == "follow"

    def test_private_user_gets_a_request(self, client, alice, bob):
        client.put(
            "/follow/privacy",
            json={"isPrivate": True},
            headers=auth_header(bob["token"]),
        )

        response = client.post(
            f"/follow/{bob['user']['id']}/follow", headers=auth_header(alice["token"])
        )
        requests = client.get("/follow/requests", headers=auth_header(bob["token"]))
        accepted = client.post(
            f"/follow/{alice['user']['id']}/accept-request",
            headers=auth_header(bob["token"]),
        )
        relationship = client.get(
            f"/follow/{bob['user']['id']}/relationship",
            headers=auth_header(alice["token"]),
        )

        assert response.json()["status"] == "pending"
        assert [u["username"] for u in requests.json()["users"]] == ["alice"]
        assert accepted.status_code == 200
        assert relationship.json()["isFollowing"] is True
        assert relationship.json()["canView"] is True

    def test_blocked_user_cannot_follow(self, client, alice, bob):
        client.post(
            f"/follow/{alice['user']['id']}/block", headers=auth_header(bob["token"])
        )

        response = client.post(
            f"/follow/{bob['user']['id']}/follow", headers=auth_header(alice["token"])
        )
        blocked = client.get("/follow/blocked", headers=auth_header(bob["token"]))

        assert response.status_code == 403
        assert [u["username"] for u in blocked.json()["users"]] == ["alice"]

    def test_follow_requires_auth(self, client, bob):
        response = client.post(f"/follow/{bob['user']['id']}/follow")

        assert response.status_code == 401


class TestNotifications:
    """Reading and clearing the inbox."""

    def test_mark_read_and_delete(self, client, alice, bob):
        client.post(
            f"/follow/{bob['user']['id']}/follow", headers=auth_header(alice["token"])
        )
        inbox = client.get("/notifications", headers=auth_header(bob["token"]))
        notification_id = inbox.json()["notifications"][0]["id"]

        stranger = client.put(
            f"/notifications/{notification_id}/read",
            headers=auth_header(alice["token"]),
        )
        read = client.put(
            f"/notifications/{notification_id}/read",
            headers=auth_header(bob["token"]),
        )
        unread = client.get(
            "/notifications",
            params={"unread_only": True},
            headers=auth_header(bob["token"]),
        )
        deleted = client.delete(
            f"/notifications/{notification_id}", headers=auth_header(bob["token"])
        )
        after = client.get("/notifications", headers=auth_header(bob["token"]))

        assert stranger.status_code == 403
        assert read.status_code == 200
        assert unread.json() == {"notifications": [], "unreadCount": 0}
        assert deleted.status_code == 200
        assert after.json()["notifications"] == []

    def test_mark_all_read(self, client, alice, bob):
        client.post(
            f"/follow/{bob['user']['id']}/follow", headers=auth_header(alice["token"])
        )

        response = client.put(
            "/notifications/read/all", headers=auth_header(bob["token"])
        )

        assert response.status_code == 200
        assert response.json()["updated"] == 1


class TestRanking:
    """Public ranking endpoints."""

    def test_global_ranking_shape(self, client, alice, bob):
        project = client.post(
            "/projects",
            json={"title": "Synth Module"},
            headers=auth_header(alice["token"]),
        ).json()
        client.get(f"/projects/{project['id']}", headers=auth_header(bob["token"]))

        response = client.get("/ranking/global", params={"limit": 1})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"users", "pagination"}
        assert body["pagination"] == {"skip": 0, "limit": 1, "total": 2}
        assert body["users"][0]["rank"] == 1
        assert body["users"][0]["username"] == "alice"
        assert body["users"][0]["stats"]["popularityScore"] == 1

    def test_second_page_continues_ranks(self, client, alice, bob):
        response = client.get("/ranking/global", params={"skip": 1, "limit": 1})

        assert [u["rank"] for u in response.json()["users"]] == [2]

    def test_weekly_and_tag_rankings(self, client, alice):
        client.post(
            "/projects",
            json={"title": "Synth Module", "tags": ["audio"]},
            headers=auth_header(alice["token"]),
        )

        weekly = client.get("/ranking/weekly")
        tags = client.get("/ranking/tags")
        projects = client.get("/ranking/projects")

        assert weekly.status_code == 200
        assert set(weekly.json()) == {"users", "pagination"}
        assert tags.json()["tags"][0]["tag"] == "audio"
        assert projects.json()["projects"][0]["rank"] == 1

    def test_my_position(self, client, alice):
        response = client.get("/ranking/my-position", headers=auth_header(alice["token"]))
        anonymous = client.get("/ranking/my-position")

        assert response.status_code == 200
        assert response.json()["position"] == 1
        assert response.json()["totalUsers"] == 1
        assert anonymous.status_code == 401
