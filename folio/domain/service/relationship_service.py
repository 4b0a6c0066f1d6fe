"""Relationship domain service.

Owns the follow graph, pending follow requests and blocks, and resolves
what one user may see of another. Resolution precedence:

1. own profile
2. target blocked the viewer
3. viewer blocked the target
4. private target the viewer does not follow
5. everything else
"""

import logfire

from folio.domain.error import (
    BusinessRuleViolationError,
    PermissionDeniedError,
    ValidationError,
)
from folio.domain.model import User
from folio.domain.repository import RelationshipRepository, UserRepository
from folio.domain.value import (
    ActivityAction,
    Capabilities,
    FollowAction,
    FollowStatus,
    NotificationType,
    PrivacySettings,
    UserId,
)

from .analytics_service import AnalyticsService
from .base import Service
from .notification_service import NotificationService
from .user_service import UserService


class RelationshipService(Service):
    """Domain service for follows, follow requests, blocks and visibility."""

    def __init__(
        self,
        relationship_repository: RelationshipRepository,
        user_repository: UserRepository,
        user_service: UserService,
        notification_service: NotificationService,
        analytics_service: AnalyticsService,
    ) -> None:
        """Initialize relationship service.

        Args:
            relationship_repository: Follow/request/block edge repository
            user_repository: User repository
            user_service: User domain service
            notification_service: Notification domain service
            analytics_service: Activity logging
        """
        self.relationship_repository = relationship_repository
        self.user_repository = user_repository
        self.user_service = user_service
        self.notification_service = notification_service
        self.analytics_service = analytics_service

    async def resolve(self, viewer_id: UserId | None, target: User) -> Capabilities:
        """Compute what ``viewer_id`` may do with ``target``.

        Args:
            viewer_id: Viewing user, or None for anonymous access
            target: Profile owner

        Returns:
            Capabilities for the pair
        """
        if viewer_id is None:
            return Capabilities(
                can_view=not target.privacy.is_private,
                follow_action=FollowAction.NONE,
            )

        if viewer_id == target.id:
            return Capabilities(is_own_profile=True, can_view=True, can_interact=True)

        repo = self.relationship_repository
        if await repo.is_blocked(target.id, viewer_id):
            return Capabilities(is_blocked_by=True)
        if await repo.is_blocked(viewer_id, target.id):
            return Capabilities(is_blocked=True)

        is_following = await repo.is_following(viewer_id, target.id)
        is_follower = await repo.is_following(target.id, viewer_id)

        if target.privacy.is_private and not is_following:
            pending = await repo.has_follow_request(viewer_id, target.id)
            if pending or not target.privacy.allow_follow_requests:
                action = FollowAction.NONE
            else:
                action = FollowAction.REQUEST
            return Capabilities(
                can_view=False,
                can_interact=False,
                is_follower=is_follower,
                has_pending_request=pending,
                follow_action=action,
            )

        return Capabilities(
            can_view=True,
            can_interact=True,
            is_following=is_following,
            is_follower=is_follower,
            follow_action=FollowAction.NONE if is_following else FollowAction.FOLLOW,
        )

    async def get_relationship(
        self, viewer_id: UserId, target_id: UserId
    ) -> Capabilities:
        """Resolve capabilities for a target looked up by ID.

        Raises:
            NotFoundError: If the target does not exist
        """
        target = await self.user_service.get_by_id(target_id)
        return await self.resolve(viewer_id, target)

    async def _ensure_not_blocked(self, user_id: UserId, other_id: UserId) -> None:
        repo = self.relationship_repository
        if await repo.is_blocked(user_id, other_id) or await repo.is_blocked(
            other_id, user_id
        ):
            raise PermissionDeniedError("You cannot follow this user")

    async def follow(self, follower: User, target_id: UserId) -> FollowStatus:
        """Follow a user, or ask to when their account is private.

        Returns:
            FOLLOWING for an accepted edge, PENDING for a follow request

        Raises:
            ValidationError: When following yourself
            NotFoundError: If the target does not exist
            PermissionDeniedError: If either user blocked the other, or the
                private target accepts no requests
            BusinessRuleViolationError: If already following or requested
        """
        with logfire.span(
            "relationship_service.follow",
            follower_id=str(follower.id),
            target_id=str(target_id),
        ):
            if follower.id == target_id:
                raise ValidationError("You cannot follow yourself")

            target = await self.user_service.get_by_id(target_id)
            await self._ensure_not_blocked(follower.id, target.id)

            repo = self.relationship_repository
            if await repo.is_following(follower.id, target.id):
                raise BusinessRuleViolationError("You already follow this user")

            if target.privacy.is_private:
                if not target.privacy.allow_follow_requests:
                    raise PermissionDeniedError("This user does not accept follow requests")
                if not await repo.add_follow_request(follower.id, target.id):
                    raise BusinessRuleViolationError(
                        "You already sent a follow request to this user"
                    )
                await self.notification_service.notify(
                    target.id,
                    follower.id,
                    NotificationType.FOLLOW_REQUEST,
                    f"{follower.username} wants to follow you",
                )
                logfire.info(
                    "Follow requested",
                    follower_id=str(follower.id),
                    target_id=str(target.id),
                )
                return FollowStatus.PENDING

            await repo.add_follow(follower.id, target.id)
            await self.notification_service.notify(
                target.id,
                follower.id,
                NotificationType.FOLLOW,
                f"{follower.username} started following you",
            )
            await self.analytics_service.log_activity(
                follower.id, ActivityAction.USER_FOLLOWED, target_user_id=target.id
            )
            logfire.info(
                "User followed", follower_id=str(follower.id), target_id=str(target.id)
            )
            return FollowStatus.FOLLOWING

    async def unfollow(self, follower_id: UserId, target_id: UserId) -> None:
        """Stop following a user; also withdraws a pending request.

        Unfollowing someone you do not follow is a no-op.
        """
        if follower_id == target_id:
            raise ValidationError("You cannot unfollow yourself")
        await self.user_service.get_by_id(target_id)

        removed = await self.relationship_repository.remove_follow(
            follower_id, target_id
        )
        await self.relationship_repository.remove_follow_request(
            follower_id, target_id
        )
        if removed:
            await self.analytics_service.log_activity(
                follower_id, ActivityAction.USER_UNFOLLOWED, target_user_id=target_id
            )
            logfire.info(
                "User unfollowed",
                follower_id=str(follower_id),
                target_id=str(target_id),
            )

    async def remove_follower(self, user_id: UserId, follower_id: UserId) -> None:
        """Drop ``follower_id`` from the user's followers."""
        await self.user_service.get_by_id(follower_id)
        await self.relationship_repository.remove_follow(follower_id, user_id)
        logfire.info(
            "Follower removed", user_id=str(user_id), follower_id=str(follower_id)
        )

    async def accept_request(self, user: User, requester_id: UserId) -> None:
        """Accept a pending follow request addressed to ``user``.

        Raises:
            NotFoundError: If the requester does not exist
            BusinessRuleViolationError: If there is no pending request
        """
        with logfire.span(
            "relationship_service.accept_request",
            user_id=str(user.id),
            requester_id=str(requester_id),
        ):
            requester = await self.user_service.get_by_id(requester_id)
            if not await self.relationship_repository.remove_follow_request(
                requester.id, user.id
            ):
                raise BusinessRuleViolationError("No pending request from this user")

            await self.relationship_repository.add_follow(requester.id, user.id)
            await self.notification_service.notify(
                requester.id,
                user.id,
                NotificationType.FOLLOW,
                f"{user.username} accepted your follow request",
            )
            logfire.info(
                "Follow request accepted",
                user_id=str(user.id),
                requester_id=str(requester.id),
            )

    async def reject_request(self, user_id: UserId, requester_id: UserId) -> None:
        """Discard a pending follow request.

        Raises:
            BusinessRuleViolationError: If there is no pending request
        """
        if not await self.relationship_repository.remove_follow_request(
            requester_id, user_id
        ):
            raise BusinessRuleViolationError("No pending request from this user")
        logfire.info(
            "Follow request rejected",
            user_id=str(user_id),
            requester_id=str(requester_id),
        )

    async def list_requests(self, user_id: UserId) -> list[User]:
        requester_ids = await self.relationship_repository.find_follow_requests(user_id)
        return await self._load_users(requester_ids)

    async def block(self, blocker_id: UserId, target_id: UserId) -> None:
        """Block a user and sever every follow edge and request between the two.

        Raises:
            ValidationError: When blocking yourself
            NotFoundError: If the target does not exist
            BusinessRuleViolationError: If the user is already blocked
        """
        with logfire.span(
            "relationship_service.block",
            blocker_id=str(blocker_id),
            target_id=str(target_id),
        ):
            if blocker_id == target_id:
                raise ValidationError("You cannot block yourself")
            await self.user_service.get_by_id(target_id)

            repo = self.relationship_repository
            if not await repo.add_block(blocker_id, target_id):
                raise BusinessRuleViolationError("This user is already blocked")

            await repo.remove_follow(blocker_id, target_id)
            await repo.remove_follow(target_id, blocker_id)
            await repo.remove_follow_request(blocker_id, target_id)
            await repo.remove_follow_request(target_id, blocker_id)

            await self.analytics_service.log_activity(
                blocker_id, ActivityAction.USER_BLOCKED, target_user_id=target_id
            )
            logfire.info(
                "User blocked", blocker_id=str(blocker_id), target_id=str(target_id)
            )

    async def unblock(self, blocker_id: UserId, target_id: UserId) -> None:
        """Lift a block. Unblocking someone not blocked is a no-op."""
        await self.user_service.get_by_id(target_id)
        if await self.relationship_repository.remove_block(blocker_id, target_id):
            await self.analytics_service.log_activity(
                blocker_id, ActivityAction.USER_UNBLOCKED, target_user_id=target_id
            )
            logfire.info(
                "User unblocked", blocker_id=str(blocker_id), target_id=str(target_id)
            )

    async def list_blocked(self, user_id: UserId) -> list[User]:
        blocked_ids = await self.relationship_repository.find_blocked(user_id)
        return await self._load_users(blocked_ids)

    async def list_followers(
        self, viewer_id: UserId | None, target_id: UserId
    ) -> list[User]:
        """List a user's followers.

        Raises:
            NotFoundError: If the user does not exist
            PermissionDeniedError: If the list is hidden from the viewer
        """
        target = await self.user_service.get_by_id(target_id)
        if viewer_id != target.id:
            capabilities = await self.resolve(viewer_id, target)
            if not target.privacy.show_followers or not capabilities.can_view:
                raise PermissionDeniedError("This user has hidden their followers")
        follower_ids = await self.relationship_repository.find_followers(target.id)
        return await self._load_users(follower_ids)

    async def list_following(
        self, viewer_id: UserId | None, target_id: UserId
    ) -> list[User]:
        """List the users a user follows.

        Raises:
            NotFoundError: If the user does not exist
            PermissionDeniedError: If the list is hidden from the viewer
        """
        target = await self.user_service.get_by_id(target_id)
        if viewer_id != target.id:
            capabilities = await self.resolve(viewer_id, target)
            if not target.privacy.show_following or not capabilities.can_view:
                raise PermissionDeniedError("This user has hidden who they follow")
        following_ids = await self.relationship_repository.find_following(target.id)
        return await self._load_users(following_ids)

    async def following_ids(self, user_id: UserId) -> list[UserId]:
        return await self.relationship_repository.find_following(user_id)

    async def update_privacy(
        self,
        user: User,
        is_private: bool | None = None,
        show_followers: bool | None = None,
        show_following: bool | None = None,
        allow_follow_requests: bool | None = None,
    ) -> User:
        """Update privacy flags; unset arguments are left unchanged."""
        with logfire.span("relationship_service.update_privacy", user_id=str(user.id)):
            changes = {
                key: value
                for key, value in {
                    "is_private": is_private,
                    "show_followers": show_followers,
                    "show_following": show_following,
                    "allow_follow_requests": allow_follow_requests,
                }.items()
                if value is not None
            }
            privacy = PrivacySettings(**{**user.privacy.model_dump(), **changes})
            saved = await self.user_repository.save(
                user.model_copy(update={"privacy": privacy})
            )
            await self.analytics_service.log_activity(
                user.id, ActivityAction.PRIVACY_CHANGED
            )
            logfire.info(
                "Privacy updated", user_id=str(user.id), fields=sorted(changes.keys())
            )
            return saved

    async def _load_users(self, user_ids: list[UserId]) -> list[User]:
        users = await self.user_service.get_many(user_ids)
        return [users[user_id] for user_id in user_ids if user_id in users]
