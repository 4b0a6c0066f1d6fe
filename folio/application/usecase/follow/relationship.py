"""Relationship check and privacy use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.auth.get_current_user import PrivacyInfo
from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import RelationshipInfo, relationship_info
from folio.application.usecase.follow.follow_user import UserActionRequest
from folio.domain.service import RelationshipService, UserService
from folio.domain.value import UserId


class GetRelationshipUseCase(BaseUseCase):
    """Use case for checking the caller's relationship to another user."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UserActionRequest) -> RelationshipInfo:
        capabilities = await self.relationship_service.get_relationship(
            UserId(UUID(request.user_id)), UserId(UUID(request.target_id))
        )
        return relationship_info(capabilities)


class UpdatePrivacyRequest(BaseModel):
    """Update privacy request. Unset flags are left unchanged."""

    user_id: str
    is_private: bool | None = None
    show_followers: bool | None = None
    show_following: bool | None = None
    allow_follow_requests: bool | None = None


class UpdatePrivacyUseCase(BaseUseCase):
    """Use case for changing the caller's privacy flags."""

    def __init__(
        self,
        relationship_service: RelationshipService,
        user_service: UserService,
    ) -> None:
        self.relationship_service = relationship_service
        self.user_service = user_service

    async def execute(self, request: UpdatePrivacyRequest) -> PrivacyInfo:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        updated = await self.relationship_service.update_privacy(
            user,
            is_private=request.is_private,
            show_followers=request.show_followers,
            show_following=request.show_following,
            allow_follow_requests=request.allow_follow_requests,
        )
        return PrivacyInfo(**updated.privacy.model_dump())
