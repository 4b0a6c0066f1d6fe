"""Unit tests for CommentService."""

import pytest

from folio.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    PermissionDeniedError,
)
from folio.domain.repository import CommentRepository
from folio.domain.service import (
    AuthService,
    CommentService,
    NotificationService,
    ProjectService,
)
from folio.domain.value import NotificationType, ProjectVisibility
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add method."""

    @pytest.mark.asyncio
    async def test_add_comment_saves_and_notifies_owner(self, unit_env):
        """A comment is stored trimmed and the project owner is notified."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        notification_service = await unit_env.get(NotificationService)

        owner = await register_user(auth_service, "owner")
        author = await register_user(auth_service, "author")
        project = await project_service.create(owner, title="Robot Arm")

        # Act
        result = await comment_service.add(project.id, author, "  Neat servo work  ")

        # Assert
        assert result.text == "Neat servo work"
        assert result.project_id == project.id

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None

        notifications, unread = await notification_service.list_for_user(
            owner.id, unread_only=False, limit=50
        )
        assert unread == 1
        assert notifications[0].type == NotificationType.COMMENT

    @pytest.mark.asyncio
    async def test_owner_comment_does_not_notify_owner(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)
        notification_service = await unit_env.get(NotificationService)

        owner = await register_user(auth_service, "owner")
        project = await project_service.create(owner, title="Robot Arm")

        await comment_service.add(project.id, owner, "Changelog: v2")

        _, unread = await notification_service.list_for_user(
            owner.id, unread_only=True, limit=50
        )
        assert unread == 0

    @pytest.mark.asyncio
    async def test_cannot_comment_on_hidden_project(self, unit_env):
        """Private projects are closed to outsiders."""
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)

        owner = await register_user(auth_service, "owner")
        outsider = await register_user(auth_service, "outsider")
        project = await project_service.create(
            owner, title="Stealth", visibility=ProjectVisibility.PRIVATE
        )

        with pytest.raises(PermissionDeniedError):
            await comment_service.add(project.id, outsider, "Let me in")


class TestDeleteComment:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_project_owner_can_delete_any_comment(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)

        owner = await register_user(auth_service, "owner")
        author = await register_user(auth_service, "author")
        project = await project_service.create(owner, title="Robot Arm")
        comment = await comment_service.add(project.id, author, "First!")

        await comment_service.delete(project.id, comment.id, owner)

        assert await comment_service.list_for_project(project.id) == []

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)

        owner = await register_user(auth_service, "owner")
        author = await register_user(auth_service, "author")
        stranger = await register_user(auth_service, "stranger")
        project = await project_service.create(owner, title="Robot Arm")
        comment = await comment_service.add(project.id, author, "First!")

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete(project.id, comment.id, stranger)


class TestCommentLikes:
    """Tests for like and unlike."""

    @pytest.mark.asyncio
    async def test_like_counts_once(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)

        owner = await register_user(auth_service, "owner")
        fan = await register_user(auth_service, "fan")
        project = await project_service.create(owner, title="Robot Arm")
        comment = await comment_service.add(project.id, owner, "Ask me anything")

        assert await comment_service.like(project.id, comment.id, fan) == 1
        with pytest.raises(BusinessRuleViolationError):
            await comment_service.like(project.id, comment.id, fan)
        assert await comment_service.unlike(project.id, comment.id, fan) == 0
