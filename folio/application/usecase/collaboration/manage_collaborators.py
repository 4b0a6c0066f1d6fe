"""Collaborator management use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.collaboration.respond_invitation import (
    CollaboratorInfo,
)
from folio.application.usecase.common import SuccessResponse
from folio.domain.service import CollaborationService, UserService
from folio.domain.value import CollaboratorRole, ProjectId, UserId


class UpdateRoleRequest(BaseModel):
    """Change a collaborator's role."""

    project_id: str
    owner_id: str
    collaborator_id: str
    role: CollaboratorRole


class UpdateRoleUseCase(BaseUseCase):
    """Use case for changing a collaborator's role on an owned project."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        user_service: UserService,
    ) -> None:
        self.collaboration_service = collaboration_service
        self.user_service = user_service

    async def execute(self, request: UpdateRoleRequest) -> CollaboratorInfo:
        owner = await self.user_service.get_by_id(UserId(UUID(request.owner_id)))
        collaborator = await self.collaboration_service.update_role(
            ProjectId(UUID(request.project_id)),
            owner,
            UserId(UUID(request.collaborator_id)),
            request.role,
        )
        return CollaboratorInfo(
            project_id=str(collaborator.project_id),
            user_id=str(collaborator.user_id),
            role=collaborator.role,
            added_at=collaborator.added_at,
        )


class RemoveCollaboratorRequest(BaseModel):
    """Remove a collaborator from an owned project."""

    project_id: str
    owner_id: str
    collaborator_id: str


class RemoveCollaboratorUseCase(BaseUseCase):
    """Use case for removing a collaborator."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        user_service: UserService,
    ) -> None:
        self.collaboration_service = collaboration_service
        self.user_service = user_service

    async def execute(self, request: RemoveCollaboratorRequest) -> SuccessResponse:
        owner = await self.user_service.get_by_id(UserId(UUID(request.owner_id)))
        await self.collaboration_service.remove(
            ProjectId(UUID(request.project_id)),
            owner,
            UserId(UUID(request.collaborator_id)),
        )
        return SuccessResponse(message="Collaborator removed")


class LeaveProjectRequest(BaseModel):
    """A collaborator leaving a project."""

    project_id: str
    user_id: str


class LeaveProjectUseCase(BaseUseCase):
    """Use case for leaving a project as a collaborator."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        user_service: UserService,
    ) -> None:
        self.collaboration_service = collaboration_service
        self.user_service = user_service

    async def execute(self, request: LeaveProjectRequest) -> SuccessResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.collaboration_service.leave(
            ProjectId(UUID(request.project_id)), user
        )
        return SuccessResponse(message="You left the project")
