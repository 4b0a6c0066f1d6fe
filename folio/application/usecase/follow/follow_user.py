"""Follow use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, SuccessResponse
from folio.domain.service import RelationshipService, UserService
from folio.domain.value import FollowStatus, UserId


class UserActionRequest(BaseModel):
    """The signed-in user acting on another user."""

    user_id: str
    target_id: str


class FollowResponse(ApiModel):
    """Outcome of a follow attempt."""

    status: FollowStatus
    message: str


class FollowUserUseCase(BaseUseCase):
    """Use case for following a user or requesting to."""

    def __init__(
        self,
        relationship_service: RelationshipService,
        user_service: UserService,
    ) -> None:
        """Initialize follow use case.

        Args:
            relationship_service: Relationship domain service
            user_service: User domain service
        """
        self.relationship_service = relationship_service
        self.user_service = user_service

    async def execute(self, request: UserActionRequest) -> FollowResponse:
        """Follow ``target_id``.

        Private accounts get a pending request instead of a follow.

        Raises:
            NotFoundError: If the target does not exist
            ValidationError: If following yourself
            PermissionDeniedError: If either side blocked the other
            BusinessRuleViolationError: If already following or already requested
        """
        follower = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        status = await self.relationship_service.follow(
            follower, UserId(UUID(request.target_id))
        )
        message = (
            "Follow request sent"
            if status == FollowStatus.PENDING
            else "You are now following this user"
        )
        return FollowResponse(status=status, message=message)


class UnfollowUserUseCase(BaseUseCase):
    """Use case for unfollowing; also withdraws a pending request."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserActionRequest) -> SuccessResponse:
        await self.relationship_service.unfollow(
            UserId(UUID(request.user_id)), UserId(UUID(request.target_id))
        )
        return SuccessResponse(message="Unfollowed")


class RemoveFollowerUseCase(BaseUseCase):
    """Use case for removing someone from the caller's followers."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserActionRequest) -> SuccessResponse:
        await self.relationship_service.remove_follower(
            UserId(UUID(request.user_id)), UserId(UUID(request.target_id))
        )
        return SuccessResponse(message="Follower removed")
