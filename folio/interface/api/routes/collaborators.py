"""Project collaboration routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status

from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.collaboration import (
    AcceptInvitationUseCase,
    CollaboratorInfo,
    InvitationInfo,
    InvitationResponseRequest,
    InviteCollaboratorRequest,
    InviteCollaboratorUseCase,
    LeaveProjectRequest,
    LeaveProjectUseCase,
    ListCollaboratorsRequest,
    ListCollaboratorsResponse,
    ListCollaboratorsUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    RejectInvitationUseCase,
    RemoveCollaboratorRequest,
    RemoveCollaboratorUseCase,
    UpdateRoleRequest,
    UpdateRoleUseCase,
)
from folio.application.usecase.common import ApiModel, SuccessResponse
from folio.domain.value import CollaboratorRole
from folio.interface.api.auth import optional_user, require_user

router = APIRouter(tags=["collaborators"], route_class=DishkaRoute)


class InviteAPIRequest(ApiModel):
    """API request for inviting a collaborator.

    The invitee is identified by exactly one of id, username or email.
    """

    user_id: UUID | None = None
    username: str | None = None
    email: str | None = None
    role: CollaboratorRole = CollaboratorRole.VIEWER


class UpdateRoleAPIRequest(ApiModel):
    """API request for changing a collaborator's role."""

    role: CollaboratorRole


@router.get(
    "/projects/{project_id}/collaborators", response_model=ListCollaboratorsResponse
)
async def list_collaborators(
    project_id: UUID,
    list_collaborators_use_case: FromDishka[ListCollaboratorsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ListCollaboratorsResponse:
    """List a project's owner and accepted collaborators."""
    viewer = await optional_user(authorization, get_current_user_use_case)
    return await list_collaborators_use_case.execute(
        ListCollaboratorsRequest(
            project_id=str(project_id), viewer_id=viewer.id if viewer else None
        )
    )


@router.post(
    "/projects/{project_id}/collaborators/invite",
    response_model=InvitationInfo,
    status_code=status.HTTP_201_CREATED,
)
async def invite_collaborator(
    project_id: UUID,
    request: InviteAPIRequest,
    invite_collaborator_use_case: FromDishka[InviteCollaboratorUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> InvitationInfo:
    """Invite a user to collaborate. Owner only.

    Args:
        project_id: Project UUID
        request: Invitee and role
        invite_collaborator_use_case: Invite use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer token

    Returns:
        The pending invitation

    Raises:
        NotAuthorizedError: If the caller does not own the project
        NotFoundError: If the invitee does not exist
        ConflictError: If the invitee is already invited or collaborating
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await invite_collaborator_use_case.execute(
        InviteCollaboratorRequest(
            project_id=str(project_id),
            inviter_id=user.id,
            invitee_id=str(request.user_id) if request.user_id else None,
            username=request.username,
            email=request.email,
            role=request.role,
        )
    )


@router.post(
    "/projects/{project_id}/collaborators/accept", response_model=CollaboratorInfo
)
async def accept_invitation(
    project_id: UUID,
    accept_invitation_use_case: FromDishka[AcceptInvitationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CollaboratorInfo:
    """Accept a pending invitation to the project."""
    user = await require_user(authorization, get_current_user_use_case)
    return await accept_invitation_use_case.execute(
        InvitationResponseRequest(project_id=str(project_id), user_id=user.id)
    )


@router.post(
    "/projects/{project_id}/collaborators/reject", response_model=SuccessResponse
)
async def reject_invitation(
    project_id: UUID,
    reject_invitation_use_case: FromDishka[RejectInvitationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await reject_invitation_use_case.execute(
        InvitationResponseRequest(project_id=str(project_id), user_id=user.id)
    )


@router.post(
    "/projects/{project_id}/collaborators/leave", response_model=SuccessResponse
)
async def leave_project(
    project_id: UUID,
    leave_project_use_case: FromDishka[LeaveProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Stop collaborating on a project."""
    user = await require_user(authorization, get_current_user_use_case)
    return await leave_project_use_case.execute(
        LeaveProjectRequest(project_id=str(project_id), user_id=user.id)
    )


@router.put(
    "/projects/{project_id}/collaborators/{user_id}/role",
    response_model=CollaboratorInfo,
)
async def update_collaborator_role(
    project_id: UUID,
    user_id: UUID,
    request: UpdateRoleAPIRequest,
    update_role_use_case: FromDishka[UpdateRoleUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CollaboratorInfo:
    """Change a collaborator's role. Owner only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await update_role_use_case.execute(
        UpdateRoleRequest(
            project_id=str(project_id),
            owner_id=user.id,
            collaborator_id=str(user_id),
            role=request.role,
        )
    )


@router.delete(
    "/projects/{project_id}/collaborators/{user_id}", response_model=SuccessResponse
)
async def remove_collaborator(
    project_id: UUID,
    user_id: UUID,
    remove_collaborator_use_case: FromDishka[RemoveCollaboratorUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Remove a collaborator. Owner only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await remove_collaborator_use_case.execute(
        RemoveCollaboratorRequest(
            project_id=str(project_id), owner_id=user.id, collaborator_id=str(user_id)
        )
    )


@router.get("/collaborations/invitations", response_model=ListInvitationsResponse)
async def list_invitations(
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ListInvitationsResponse:
    """List the signed-in user's pending invitations."""
    user = await require_user(authorization, get_current_user_use_case)
    return await list_invitations_use_case.execute(
        ListInvitationsRequest(user_id=user.id)
    )
