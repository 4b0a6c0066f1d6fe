"""Unit tests for CollaborationService."""

import pytest

from folio.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from folio.domain.service import AuthService, CollaborationService, ProjectService
from folio.domain.value import CollaboratorRole, ProjectVisibility
from tests.conftest import register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def project_setup(unit_env):
    """Owner, invitee and a private project, created lazily per test."""

    async def _setup():
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        owner = await register_user(auth_service, "owner")
        invitee = await register_user(auth_service, "helper")
        project = await project_service.create(
            owner, title="Shared Work", visibility=ProjectVisibility.PRIVATE
        )
        return owner, invitee, project

    return _setup


class TestInvite:
    """Tests for the invitation round trip."""

    @pytest.mark.asyncio
    async def test_invite_accept_makes_collaborator(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        project_service = await unit_env.get(ProjectService)

        invitation, invited = await collaboration_service.invite(
            project.id, owner, username="helper", role=CollaboratorRole.EDITOR
        )
        pending = await collaboration_service.list_invitations(invitee.id)

        assert invited.id == invitee.id
        assert invitation.role == CollaboratorRole.EDITOR
        assert [i.project_id for i in pending] == [project.id]

        collaborator = await collaboration_service.accept(project.id, invitee)
        _, collaborators = await collaboration_service.list_collaborators(
            project.id, invitee
        )

        assert collaborator.role == CollaboratorRole.EDITOR
        assert [c.user_id for c in collaborators] == [invitee.id]
        assert await collaboration_service.list_invitations(invitee.id) == []
        assert await project_service.can_view(project, invitee) is True
        assert await project_service.can_edit(project, invitee) is True

    @pytest.mark.asyncio
    async def test_invite_by_email(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)

        _, invited = await collaboration_service.invite(
            project.id, owner, email="HELPER@example.com"
        )

        assert invited.id == invitee.id

    @pytest.mark.asyncio
    async def test_second_invite_conflicts(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        await collaboration_service.invite(project.id, owner, user_id=invitee.id)

        with pytest.raises(ConflictError, match="pending invitation"):
            await collaboration_service.invite(project.id, owner, user_id=invitee.id)

    @pytest.mark.asyncio
    async def test_inviting_a_collaborator_conflicts(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        await collaboration_service.invite(project.id, owner, user_id=invitee.id)
        await collaboration_service.accept(project.id, invitee)

        with pytest.raises(ConflictError, match="already a collaborator"):
            await collaboration_service.invite(project.id, owner, user_id=invitee.id)

    @pytest.mark.asyncio
    async def test_owner_cannot_invite_themselves(self, unit_env, project_setup):
        owner, _, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)

        with pytest.raises(ValidationError):
            await collaboration_service.invite(project.id, owner, user_id=owner.id)

    @pytest.mark.asyncio
    async def test_only_owner_can_invite(self, unit_env, project_setup):
        _, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        auth_service = await unit_env.get(AuthService)
        outsider = await register_user(auth_service, "outsider")

        with pytest.raises(NotAuthorizedError):
            await collaboration_service.invite(
                project.id, outsider, user_id=invitee.id
            )

    @pytest.mark.asyncio
    async def test_reject_discards_invitation(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        await collaboration_service.invite(project.id, owner, user_id=invitee.id)

        await collaboration_service.reject(project.id, invitee)

        with pytest.raises(NotFoundError):
            await collaboration_service.accept(project.id, invitee)


class TestMembership:
    """Tests for role changes and leaving."""

    @pytest.mark.asyncio
    async def test_viewer_cannot_edit(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        project_service = await unit_env.get(ProjectService)
        await collaboration_service.invite(project.id, owner, user_id=invitee.id)
        await collaboration_service.accept(project.id, invitee)

        assert await project_service.can_edit(project, invitee) is False

        await collaboration_service.update_role(
            project.id, owner, invitee.id, CollaboratorRole.EDITOR
        )

        assert await project_service.can_edit(project, invitee) is True

    @pytest.mark.asyncio
    async def test_leave_removes_access(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        project_service = await unit_env.get(ProjectService)
        await collaboration_service.invite(project.id, owner, user_id=invitee.id)
        await collaboration_service.accept(project.id, invitee)

        await collaboration_service.leave(project.id, invitee)

        assert await project_service.can_view(project, invitee) is False
        with pytest.raises(ValidationError):
            await collaboration_service.leave(project.id, invitee)


class TestEditorPermissions:
    """Editors change content; slug and visibility stay with the owner."""

    @pytest.mark.asyncio
    async def test_editor_updates_content_fields(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        project_service = await unit_env.get(ProjectService)
        await collaboration_service.invite(
            project.id, owner, user_id=invitee.id, role=CollaboratorRole.EDITOR
        )
        await collaboration_service.accept(project.id, invitee)

        updated = await project_service.update(
            project.id, invitee, title="  Shared Work v2 ", tags=["Rust", "cli"]
        )

        assert updated.title == "Shared Work v2"
        assert [t.root for t in updated.tags] == ["rust", "cli"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fields",
        [{"visibility": ProjectVisibility.PUBLIC}, {"slug": "taken-over"}],
    )
    async def test_editor_cannot_change_owner_fields(
        self, unit_env, project_setup, fields
    ):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        project_service = await unit_env.get(ProjectService)
        await collaboration_service.invite(
            project.id, owner, user_id=invitee.id, role=CollaboratorRole.EDITOR
        )
        await collaboration_service.accept(project.id, invitee)

        with pytest.raises(NotAuthorizedError):
            await project_service.update(project.id, invitee, **fields)

        stored = await project_service.get_by_id(project.id)
        assert stored.visibility == ProjectVisibility.PRIVATE
        assert stored.slug == project.slug

    @pytest.mark.asyncio
    async def test_viewer_cannot_edit(self, unit_env, project_setup):
        owner, invitee, project = await project_setup()
        collaboration_service = await unit_env.get(CollaborationService)
        project_service = await unit_env.get(ProjectService)
        await collaboration_service.invite(
            project.id, owner, user_id=invitee.id, role=CollaboratorRole.VIEWER
        )
        await collaboration_service.accept(project.id, invitee)

        with pytest.raises(NotAuthorizedError):
            await project_service.update(project.id, invitee, title="Mine now")
