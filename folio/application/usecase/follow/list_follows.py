"""Follower and following list use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import user_summary
from folio.application.usecase.follow.follow_request import UserListResponse
from folio.domain.service import RelationshipService
from folio.domain.value import UserId


class FollowListRequest(BaseModel):
    """List someone's followers or followings."""

    target_id: str
    viewer_id: str | None = None


class ListFollowersUseCase(BaseUseCase):
    """Use case for listing a user's followers."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: FollowListRequest) -> UserListResponse:
        """List followers.

        Raises:
            NotFoundError: If the user does not exist
            PermissionDeniedError: If the list is hidden from the viewer
        """
        users = await self.relationship_service.list_followers(
            UserId(UUID(request.viewer_id)) if request.viewer_id else None,
            UserId(UUID(request.target_id)),
        )
        return UserListResponse(users=[user_summary(user) for user in users])


class ListFollowingUseCase(BaseUseCase):
    """Use case for listing who a user follows."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: FollowListRequest) -> UserListResponse:
        users = await self.relationship_service.list_following(
            UserId(UUID(request.viewer_id)) if request.viewer_id else None,
            UserId(UUID(request.target_id)),
        )
        return UserListResponse(users=[user_summary(user) for user in users])
