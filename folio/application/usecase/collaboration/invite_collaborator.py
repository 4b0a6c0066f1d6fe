"""Invite collaborator use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, UserSummary, user_summary
from folio.domain.model import Invitation, User
from folio.domain.service import CollaborationService, UserService
from folio.domain.value import CollaboratorRole, ProjectId, UserId


class InvitationInfo(ApiModel):
    """A pending invitation."""

    project_id: str
    project_title: str | None = None
    user: UserSummary | None = None
    role: CollaboratorRole
    invited_by: str
    invited_at: datetime


def invitation_info(
    invitation: Invitation, user: User | None = None, project_title: str | None = None
) -> InvitationInfo:
    return InvitationInfo(
        project_id=str(invitation.project_id),
        project_title=project_title,
        user=user_summary(user) if user else None,
        role=invitation.role,
        invited_by=str(invitation.invited_by),
        invited_at=invitation.invited_at,
    )


class InviteCollaboratorRequest(BaseModel):
    """Invite collaborator request.

    The invitee is named by exactly one of ``invitee_id``, ``username`` or
    ``email``; the first one set wins.
    """

    project_id: str
    inviter_id: str
    invitee_id: str | None = None
    username: str | None = None
    email: str | None = None
    role: CollaboratorRole = CollaboratorRole.VIEWER


class InviteCollaboratorUseCase(BaseUseCase):
    """Use case for inviting a user to collaborate on an owned project."""

    def __init__(
        self,
        collaboration_service: CollaborationService,
        user_service: UserService,
    ) -> None:
        """Initialize invite collaborator use case.

        Args:
            collaboration_service: Collaboration domain service
            user_service: User domain service
        """
        self.collaboration_service = collaboration_service
        self.user_service = user_service

    async def execute(self, request: InviteCollaboratorRequest) -> InvitationInfo:
        """Execute invite flow.

        Raises:
            NotFoundError: If the project or invitee does not exist
            NotAuthorizedError: If the inviter does not own the project
            ValidationError: If no invitee is named or the invitee is the owner
            ConflictError: If the invitee already collaborates or is invited
        """
        inviter = await self.user_service.get_by_id(UserId(UUID(request.inviter_id)))
        invitation, invitee = await self.collaboration_service.invite(
            ProjectId(UUID(request.project_id)),
            inviter,
            user_id=UserId(UUID(request.invitee_id)) if request.invitee_id else None,
            username=request.username,
            email=request.email,
            role=request.role,
        )
        return invitation_info(invitation, invitee)
