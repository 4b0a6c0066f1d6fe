"""Block use cases."""

from uuid import UUID

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import SuccessResponse, user_summary
from folio.application.usecase.follow.follow_request import (
    UserListRequest,
    UserListResponse,
)
from folio.application.usecase.follow.follow_user import UserActionRequest
from folio.domain.service import RelationshipService
from folio.domain.value import UserId


class BlockUserUseCase(BaseUseCase):
    """Use case for blocking a user.

    Blocking removes follows and pending requests in both directions.
    """

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserActionRequest) -> SuccessResponse:
        await self.relationship_service.block(
            UserId(UUID(request.user_id)), UserId(UUID(request.target_id))
        )
        return SuccessResponse(message="User blocked")


class UnblockUserUseCase(BaseUseCase):
    """Use case for unblocking; a no-op when not blocked."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserActionRequest) -> SuccessResponse:
        await self.relationship_service.unblock(
            UserId(UUID(request.user_id)), UserId(UUID(request.target_id))
        )
        return SuccessResponse(message="User unblocked")


class ListBlockedUseCase(BaseUseCase):
    """Use case for listing users the caller has blocked."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserListRequest) -> UserListResponse:
        users = await self.relationship_service.list_blocked(
            UserId(UUID(request.user_id))
        )
        return UserListResponse(users=[user_summary(user) for user in users])
