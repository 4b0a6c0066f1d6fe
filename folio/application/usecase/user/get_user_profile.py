"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import (
    ApiModel,
    ProjectInfo,
    RelationshipInfo,
    project_info,
    relationship_info,
)
from folio.domain.error import NotFoundError
from folio.domain.repository import RelationshipRepository
from folio.domain.service import ProjectService, RelationshipService, UserService
from folio.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str
    viewer_id: str | None = None


class ProfileInfo(ApiModel):
    """Profile header.

    Follower counts are omitted when the viewer may not see the profile.
    """

    id: str
    username: str
    name: str
    bio: str | None
    avatar_url: str | None
    is_private: bool
    followers_count: int | None = None
    following_count: int | None = None
    created_at: datetime


class GetUserProfileResponse(ApiModel):
    """Get user profile response."""

    user: ProfileInfo
    projects: list[ProjectInfo]
    relationship: RelationshipInfo


class GetUserProfileUseCase(BaseUseCase):
    """Use case for viewing a user's profile page."""

    def __init__(
        self,
        user_service: UserService,
        relationship_service: RelationshipService,
        project_service: ProjectService,
        relationship_repository: RelationshipRepository,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            relationship_service: Resolves what the viewer may see
            project_service: Project domain service
            relationship_repository: Follower counts
        """
        self.user_service = user_service
        self.relationship_service = relationship_service
        self.project_service = project_service
        self.relationship_repository = relationship_repository

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Steps:
        1. Load the profile owner by username
        2. Resolve the viewer's capabilities
        3. Return the projects the viewer may see

        Raises:
            NotFoundError: If no active user has this username
        """
        owner = await self.user_service.get_by_username(request.username)
        if owner.is_deleted:
            raise NotFoundError("User", request.username)

        viewer = (
            await self.user_service.get_by_id(UserId(UUID(request.viewer_id)))
            if request.viewer_id
            else None
        )
        capabilities = await self.relationship_service.resolve(
            viewer.id if viewer else None, owner
        )

        profile = ProfileInfo(
            id=str(owner.id),
            username=owner.username.root,
            name=owner.name,
            bio=owner.bio,
            avatar_url=owner.avatar_url,
            is_private=owner.privacy.is_private,
            created_at=owner.created_at,
        )

        projects: list[ProjectInfo] = []
        if capabilities.can_view:
            followers = await self.relationship_repository.count_followers([owner.id])
            following = await self.relationship_service.following_ids(owner.id)
            profile = profile.model_copy(
                update={
                    "followers_count": followers.get(owner.id, 0),
                    "following_count": len(following),
                }
            )
            visible = await self.project_service.list_for_profile(owner, viewer)
            likes = await self.project_service.likes_count([p.id for p in visible])
            projects = [project_info(p, likes.get(p.id, 0), owner) for p in visible]

        return GetUserProfileResponse(
            user=profile,
            projects=projects,
            relationship=relationship_info(capabilities),
        )
