"""Unit tests for RelationshipService."""

import pytest

from folio.domain.error import BusinessRuleViolationError, PermissionDeniedError
from folio.domain.service import AuthService, ProjectService, RelationshipService
from folio.domain.value import FollowAction, FollowStatus
from tests.conftest import register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolve:
    """Tests for capability resolution."""

    @pytest.mark.asyncio
    async def test_anonymous_can_view_public_profile(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        target = await register_user(auth_service, "public")

        capabilities = await relationship_service.resolve(None, target)

        assert capabilities.can_view is True
        assert capabilities.can_interact is False
        assert capabilities.follow_action == FollowAction.NONE

    @pytest.mark.asyncio
    async def test_anonymous_cannot_view_private_profile(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        target = await register_user(auth_service, "hermit")
        target = await relationship_service.update_privacy(target, is_private=True)

        capabilities = await relationship_service.resolve(None, target)

        assert capabilities.can_view is False

    @pytest.mark.asyncio
    async def test_own_profile(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        user = await register_user(auth_service, "self")

        capabilities = await relationship_service.resolve(user.id, user)

        assert capabilities.is_own_profile is True
        assert capabilities.can_view is True

    @pytest.mark.asyncio
    async def test_stranger_is_offered_follow(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        viewer = await register_user(auth_service, "viewer")
        target = await register_user(auth_service, "target")

        capabilities = await relationship_service.resolve(viewer.id, target)

        assert capabilities.can_view is True
        assert capabilities.is_following is False
        assert capabilities.follow_action == FollowAction.FOLLOW


class TestFollow:
    """Tests for following public and private accounts."""

    @pytest.mark.asyncio
    async def test_follow_public_user(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        follower = await register_user(auth_service, "fan")
        target = await register_user(auth_service, "star")

        status = await relationship_service.follow(follower, target.id)
        capabilities = await relationship_service.resolve(follower.id, target)

        assert status == FollowStatus.FOLLOWING
        assert capabilities.is_following is True
        assert capabilities.follow_action == FollowAction.NONE

    @pytest.mark.asyncio
    async def test_follow_twice_is_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        follower = await register_user(auth_service, "fan")
        target = await register_user(auth_service, "star")
        await relationship_service.follow(follower, target.id)

        with pytest.raises(BusinessRuleViolationError):
            await relationship_service.follow(follower, target.id)

    @pytest.mark.asyncio
    async def test_private_user_gets_request_until_accepted(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        follower = await register_user(auth_service, "asker")
        target = await register_user(auth_service, "guarded")
        target = await relationship_service.update_privacy(target, is_private=True)

        before = await relationship_service.resolve(follower.id, target)
        status = await relationship_service.follow(follower, target.id)
        pending = await relationship_service.resolve(follower.id, target)
        requests = await relationship_service.list_requests(target.id)

        assert before.follow_action == FollowAction.REQUEST
        assert status == FollowStatus.PENDING
        assert pending.can_view is False
        assert pending.has_pending_request is True
        assert pending.follow_action == FollowAction.NONE
        assert [u.id for u in requests] == [follower.id]

        await relationship_service.accept_request(target, follower.id)
        accepted = await relationship_service.resolve(follower.id, target)

        assert accepted.can_view is True
        assert accepted.is_following is True
        assert await relationship_service.list_requests(target.id) == []

    @pytest.mark.asyncio
    async def test_accept_without_request_is_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        user = await register_user(auth_service, "owner")
        stranger = await register_user(auth_service, "stranger")

        with pytest.raises(BusinessRuleViolationError):
            await relationship_service.accept_request(user, stranger.id)


class TestBlock:
    """Tests for blocking."""

    @pytest.mark.asyncio
    async def test_block_severs_follows_both_ways(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        alice = await register_user(auth_service, "alice")
        bob = await register_user(auth_service, "bob")
        await relationship_service.follow(alice, bob.id)
        await relationship_service.follow(bob, alice.id)

        await relationship_service.block(alice.id, bob.id)

        assert await relationship_service.following_ids(alice.id) == []
        assert await relationship_service.following_ids(bob.id) == []

    @pytest.mark.asyncio
    async def test_blocked_pair_cannot_follow_in_either_direction(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        alice = await register_user(auth_service, "alice")
        bob = await register_user(auth_service, "bob")
        await relationship_service.block(alice.id, bob.id)

        with pytest.raises(PermissionDeniedError):
            await relationship_service.follow(alice, bob.id)
        with pytest.raises(PermissionDeniedError):
            await relationship_service.follow(bob, alice.id)

    @pytest.mark.asyncio
    async def test_block_is_visible_from_both_sides(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        alice = await register_user(auth_service, "alice")
        bob = await register_user(auth_service, "bob")
        await relationship_service.block(alice.id, bob.id)

        blocker_view = await relationship_service.resolve(alice.id, bob)
        blocked_view = await relationship_service.resolve(bob.id, alice)

        assert blocker_view.is_blocked is True
        assert blocker_view.can_view is False
        assert blocked_view.is_blocked_by is True
        assert blocked_view.can_view is False

    @pytest.mark.asyncio
    async def test_unblock_restores_access(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        alice = await register_user(auth_service, "alice")
        bob = await register_user(auth_service, "bob")
        await relationship_service.block(alice.id, bob.id)

        await relationship_service.unblock(alice.id, bob.id)
        capabilities = await relationship_service.resolve(bob.id, alice)

        assert capabilities.can_view is True
        assert await relationship_service.list_blocked(alice.id) == []


class TestProfileProjects:
    """Tests for project visibility through profile privacy."""

    @pytest.mark.asyncio
    async def test_private_profile_hides_projects_until_follow_accepted(
        self, unit_env
    ):
        auth_service = await unit_env.get(AuthService)
        relationship_service = await unit_env.get(RelationshipService)
        project_service = await unit_env.get(ProjectService)
        owner = await register_user(auth_service, "maker")
        viewer = await register_user(auth_service, "watcher")
        await project_service.create(owner, title="Secret Sauce")
        owner = await relationship_service.update_privacy(owner, is_private=True)

        assert await project_service.list_for_profile(owner, None) == []
        assert await project_service.list_for_profile(owner, viewer) == []

        await relationship_service.follow(viewer, owner.id)
        await relationship_service.accept_request(owner, viewer.id)
        visible = await project_service.list_for_profile(owner, viewer)

        assert [p.title for p in visible] == ["Secret Sauce"]
