"""End-to-end tests for reports and the admin endpoints."""

import pytest

from tests.conftest import (
    DEFAULT_PASSWORD,
    api_register,
    auth_header,
    promote_to_admin,
)
from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


@pytest.fixture
def admin(client):
    admin = api_register(client, "moderator")
    promote_to_admin(client, admin["user"]["id"])
    return admin


@pytest.fixture
def reporter(client):
    return api_register(client, "reporter")


@pytest.fixture
def troll(client):
    return api_register(client, "troll")


def file_report(client, reporter, target) -> dict:
    response = client.post(
        "/reports",
        json={
            "type": "user",
            "reason": "harassment",
            "description": "Abusive comments",
            "userId": target["user"]["id"],
        },
        headers=auth_header(reporter["token"]),
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestReports:
    """Filing reports."""

    def test_file_report(self, client, reporter, troll):
        report = file_report(client, reporter, troll)

        assert report["status"] == "pending"
        assert report["targetUserId"] == troll["user"]["id"]
        assert report["action"] == "none"

    def test_self_report_is_a_bad_request(self, client, reporter):
        response = client.post(
            "/reports",
            json={
                "type": "user",
                "reason": "spam",
                "description": "Me",
                "userId": reporter["user"]["id"],
            },
            headers=auth_header(reporter["token"]),
        )

        assert response.status_code == 400
        assert response.json()["error"] == "You cannot report yourself"

    def test_report_requires_auth(self, client, troll):
        response = client.post(
            "/reports",
            json={"type": "user", "reason": "spam", "description": "x"},
        )

        assert response.status_code == 401


class TestAdminAccess:
    """Admin endpoints reject regular users."""

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/admin/reports"),
            ("get", "/admin/reports/stats"),
            ("get", "/admin/users"),
            ("get", "/admin/users/moderated"),
        ],
    )
    def test_non_admin_gets_403(self, client, reporter, method, path):
        response = getattr(client, method)(path, headers=auth_header(reporter["token"]))

        assert response.status_code == 403
        assert "error" in response.json()


class TestReportResolution:
    """Admins work through the queue."""

    def test_ban_through_report_blocks_login(self, client, admin, reporter, troll):
        report = file_report(client, reporter, troll)

        queue = client.get(
            "/admin/reports",
            params={"status": "pending"},
            headers=auth_header(admin["token"]),
        )
        resolved = client.post(
            f"/admin/reports/{report['id']}/action",
            json={"action": "account_banned", "reason": "Harassment"},
            headers=auth_header(admin["token"]),
        )
        login = client.post(
            "/auth/login", json={"identifier": "troll", "password": DEFAULT_PASSWORD}
        )

        assert [r["id"] for r in queue.json()["reports"]] == [report["id"]]
        assert resolved.status_code == 200
        assert resolved.json()["status"] == "resolved"
        assert resolved.json()["action"] == "account_banned"
        assert login.status_code == 403
        assert login.json()["type"] == "ACCOUNT_BANNED"

    def test_closed_report_cannot_be_rejected(self, client, admin, reporter, troll):
        report = file_report(client, reporter, troll)
        client.post(
            f"/admin/reports/{report['id']}/action",
            json={"action": "warning"},
            headers=auth_header(admin["token"]),
        )

        rejected = client.post(
            f"/admin/reports/{report['id']}/reject",
            json={"adminNotes": "never mind"},
            headers=auth_header(admin["token"]),
        )
        reopened = client.put(
            f"/admin/reports/{report['id']}/status",
            json={"status": "pending"},
            headers=auth_header(admin["token"]),
        )
        detail = client.get(
            f"/admin/reports/{report['id']}", headers=auth_header(admin["token"])
        )

        assert rejected.status_code == 400
        assert reopened.status_code == 400
        assert detail.json()["status"] == "resolved"
        assert detail.json()["action"] == "warning"

    def test_report_stats(self, client, admin, reporter, troll):
        file_report(client, reporter, troll)

        response = client.get(
            "/admin/reports/stats", headers=auth_header(admin["token"])
        )

        assert response.status_code == 200
        assert response.json()["total"] == 1


class TestAccountActions:
    """Direct suspend, reactivate and admin self-protection."""

    def test_suspend_then_reactivate(self, client, admin, troll):
        suspended = client.post(
            f"/admin/users/{troll['user']['id']}/suspend",
            json={"reason": "Cooling off"},
            headers=auth_header(admin["token"]),
        )
        me = client.get("/auth/me", headers=auth_header(troll["token"]))
        reactivated = client.post(
            f"/admin/users/{troll['user']['id']}/reactivate",
            headers=auth_header(admin["token"]),
        )
        me_again = client.get("/auth/me", headers=auth_header(troll["token"]))

        assert suspended.json()["isSuspended"] is True
        assert me.status_code == 403
        assert me.json()["type"] == "ACCOUNT_SUSPENDED"
        assert reactivated.json()["isSuspended"] is False
        assert me_again.status_code == 200

    def test_suspended_user_reads_public_profiles_anonymously(
        self, client, admin, reporter, troll
    ):
        client.post(
            f"/admin/users/{troll['user']['id']}/suspend",
            json={"reason": "Cooling off"},
            headers=auth_header(admin["token"]),
        )

        response = client.get("/users/reporter", headers=auth_header(troll["token"]))

        assert response.status_code == 200
        assert response.json()["relationship"]["isOwnProfile"] is False

    def test_suspend_requires_reason(self, client, admin, troll):
        response = client.post(
            f"/admin/users/{troll['user']['id']}/suspend",
            json={},
            headers=auth_header(admin["token"]),
        )

        assert response.status_code == 400

    def test_admin_cannot_ban_self(self, client, admin):
        response = client.post(
            f"/admin/users/{admin['user']['id']}/ban",
            json={"reason": "Oops"},
            headers=auth_header(admin["token"]),
        )

        assert response.status_code == 403
