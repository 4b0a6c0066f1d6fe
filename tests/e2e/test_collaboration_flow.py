"""End-to-end tests for project collaborators and invitations."""

import pytest

from tests.conftest import api_register, auth_header
from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


@pytest.fixture
def owner(client):
    return api_register(client, "maker")


@pytest.fixture
def helper(client):
    return api_register(client, "helper")


@pytest.fixture
def project(client, owner):
    response = client.post(
        "/projects",
        json={"title": "Plotter", "visibility": "private"},
        headers=auth_header(owner["token"]),
    )
    assert response.status_code == 201, response.text
    return response.json()


def invite(client, project, owner, **body):
    return client.post(
        f"/projects/{project['id']}/collaborators/invite",
        json=body,
        headers=auth_header(owner["token"]),
    )


class TestCollaborators:
    """Invitation round trip over HTTP."""

    def test_invite_accept_and_list(self, client, owner, helper, project):
        invited = invite(client, project, owner, username="helper", role="editor")
        pending = client.get(
            "/collaborations/invitations", headers=auth_header(helper["token"])
        )
        accepted = client.post(
            f"/projects/{project['id']}/collaborators/accept",
            headers=auth_header(helper["token"]),
        )
        listing = client.get(
            f"/projects/{project['id']}/collaborators",
            headers=auth_header(helper["token"]),
        )

        assert invited.status_code == 201
        assert invited.json()["role"] == "editor"
        assert [i["projectId"] for i in pending.json()["invitations"]] == [
            project["id"]
        ]
        assert accepted.status_code == 200
        assert accepted.json()["role"] == "editor"
        assert listing.json()["owner"]["username"] == "maker"
        assert [c["user"]["username"] for c in listing.json()["collaborators"]] == [
            "helper"
        ]

    def test_reinvite_conflicts(self, client, owner, helper, project):
        invite(client, project, owner, username="helper")

        response = invite(client, project, owner, username="helper")

        assert response.status_code == 409
        assert "pending invitation" in response.json()["error"]

    def test_only_owner_invites(self, client, owner, helper, project):
        response = invite(client, project, helper, username="maker")

        assert response.status_code == 403

    def test_editor_cannot_change_visibility(self, client, owner, helper, project):
        invite(client, project, owner, username="helper", role="editor")
        client.post(
            f"/projects/{project['id']}/collaborators/accept",
            headers=auth_header(helper["token"]),
        )

        title = client.put(
            f"/projects/{project['id']}",
            json={"title": "Pen Plotter"},
            headers=auth_header(helper["token"]),
        )
        visibility = client.put(
            f"/projects/{project['id']}",
            json={"visibility": "public"},
            headers=auth_header(helper["token"]),
        )

        assert title.status_code == 200
        assert visibility.status_code == 403

    def test_role_change_and_removal(self, client, owner, helper, project):
        invite(client, project, owner, username="helper")
        client.post(
            f"/projects/{project['id']}/collaborators/accept",
            headers=auth_header(helper["token"]),
        )

        role = client.put(
            f"/projects/{project['id']}/collaborators/{helper['user']['id']}/role",
            json={"role": "editor"},
            headers=auth_header(owner["token"]),
        )
        removed = client.delete(
            f"/projects/{project['id']}/collaborators/{helper['user']['id']}",
            headers=auth_header(owner["token"]),
        )
        hidden = client.get(
            f"/projects/{project['id']}", headers=auth_header(helper["token"])
        )

        assert role.status_code == 200
        assert role.json()["role"] == "editor"
        assert removed.status_code == 200
        assert hidden.status_code == 403
