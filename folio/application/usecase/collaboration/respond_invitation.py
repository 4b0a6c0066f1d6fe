"""Accept and reject invitation use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, SuccessResponse
from folio.domain.service import CollaborationService, UserService
from folio.domain.value import CollaboratorRole, ProjectId, UserId


class InvitationResponseRequest(BaseModel):
    """The invitee answering an invitation."""

    project_id: str
    user_id: str


class CollaboratorInfo(ApiModel):
    """Accepted collaborator."""

    project_id: str
    user_id: str
    role: CollaboratorRole
    added_at: datetime


class AcceptInvitationUseCase(BaseUseCase):
    """Use case for joining a project from a pending invitation."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        user_service: UserService,
    ) -> None:
        self.collaboration_service = collaboration_service
        self.user_service = user_service

    async def execute(self, request: InvitationResponseRequest) -> CollaboratorInfo:
        """Accept the invitation.

        Raises:
            NotFoundError: If the project or invitation does not exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        collaborator = await self.collaboration_service.accept(
            ProjectId(UUID(request.project_id)), user
        )
        return CollaboratorInfo(
            project_id=str(collaborator.project_id),
            user_id=str(collaborator.user_id),
            role=collaborator.role,
            added_at=collaborator.added_at,
        )


class RejectInvitationUseCase(BaseUseCase):
    """Use case for declining a pending invitation."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        user_service: UserService,
    ) -> None:
        self.collaboration_service = collaboration_service
        self.user_service = user_service

    async def execute(self, request: InvitationResponseRequest) -> SuccessResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.collaboration_service.reject(
            ProjectId(UUID(request.project_id)), user
        )
        return SuccessResponse(message="Invitation rejected")
