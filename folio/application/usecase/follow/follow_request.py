"""Follow request use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import (
    ApiModel,
    SuccessResponse,
    UserSummary,
    user_summary,
)
from folio.application.usecase.follow.follow_user import UserActionRequest
from folio.domain.service import RelationshipService, UserService
from folio.domain.value import UserId


class AcceptFollowRequestUseCase(BaseUseCase):
    """Use case for accepting a pending follow request."""

    def __init__(
        self,
        relationship_service: RelationshipService,
        user_service: UserService,
    ) -> None:
        self.relationship_service = relationship_service
        self.user_service = user_service

    async def execute(self, request: UserActionRequest) -> SuccessResponse:
        """Accept the request from ``target_id``.

        Raises:
            BusinessRuleViolationError: If there is no pending request
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.relationship_service.accept_request(
            user, UserId(UUID(request.target_id))
        )
        return SuccessResponse(message="Follow request accepted")


class RejectFollowRequestUseCase(BaseUseCase):
    """Use case for rejecting a pending follow request."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserActionRequest) -> SuccessResponse:
        await self.relationship_service.reject_request(
            UserId(UUID(request.user_id)), UserId(UUID(request.target_id))
        )
        return SuccessResponse(message="Follow request rejected")


class UserListRequest(BaseModel):
    """Request naming the signed-in user."""

    user_id: str


class UserListResponse(ApiModel):
    """A list of user cards."""

    users: list[UserSummary]


class ListFollowRequestsUseCase(BaseUseCase):
    """Use case for listing pending follow requests, newest first."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserListRequest) -> UserListResponse:
        users = await self.relationship_service.list_requests(
            UserId(UUID(request.user_id))
        )
        return UserListResponse(users=[user_summary(user) for user in users])
