"""Collaboration listing use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.collaboration.invite_collaborator import (
    InvitationInfo,
    invitation_info,
)
from folio.application.usecase.common import ApiModel, UserSummary, user_summary
from folio.domain.service import CollaborationService, ProjectService, UserService
from folio.domain.value import CollaboratorRole, ProjectId, UserId


class ListCollaboratorsRequest(BaseModel):
    """List collaborators request."""

    project_id: str
    viewer_id: str | None = None


class CollaboratorEntry(ApiModel):
    """Collaborator with their public card."""

    user: UserSummary
    role: CollaboratorRole
    added_at: datetime


class ListCollaboratorsResponse(ApiModel):
    """Owner and collaborators of a project."""

    owner: UserSummary
    collaborators: list[CollaboratorEntry]


class ListCollaboratorsUseCase(BaseUseCase):
    """Use case for listing a visible project's collaborators."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        user_service: UserService,
    ) -> None:
        self.collaboration_service = collaboration_service
        self.user_service = user_service

    async def execute(
        self, request: ListCollaboratorsRequest
    ) -> ListCollaboratorsResponse:
        """List collaborators.

        Raises:
            NotFoundError: If the project does not exist
            PermissionDeniedError: If the viewer may not see the project
        """
        viewer = (
            await self.user_service.get_by_id(UserId(UUID(request.viewer_id)))
            if request.viewer_id
            else None
        )
        project, collaborators = await self.collaboration_service.list_collaborators(
            ProjectId(UUID(request.project_id)), viewer
        )
        users = await self.user_service.get_many(
            [project.owner_id, *(c.user_id for c in collaborators)]
        )
        return ListCollaboratorsResponse(
            owner=user_summary(users[project.owner_id]),
            collaborators=[
                CollaboratorEntry(
                    user=user_summary(users[c.user_id]),
                    role=c.role,
                    added_at=c.added_at,
                )
                for c in collaborators
                if c.user_id in users
            ],
        )


class ListInvitationsRequest(BaseModel):
    """The signed-in user's pending invitations."""

    user_id: str


class ListInvitationsResponse(ApiModel):
    """Pending invitations, newest first."""

    invitations: list[InvitationInfo]


class ListInvitationsUseCase(BaseUseCase):
    """Use case for listing the caller's pending invitations."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        project_service: ProjectService,
    ) -> None:
        self.collaboration_service = collaboration_service
        self.project_service = project_service

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        invitations = await self.collaboration_service.list_invitations(
            UserId(UUID(request.user_id))
        )
        result = []
        for invitation in invitations:
            project = await self.project_service.get_by_id(invitation.project_id)
            result.append(invitation_info(invitation, project_title=project.title))
        return ListInvitationsResponse(invitations=result)
