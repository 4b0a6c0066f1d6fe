"""Collaboration use cases."""

from .invite_collaborator import (
    InvitationInfo,
    InviteCollaboratorRequest,
    InviteCollaboratorUseCase,
)
from .list_collaborators import (
    ListCollaboratorsRequest,
    ListCollaboratorsResponse,
    ListCollaboratorsUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from .manage_collaborators import (
    LeaveProjectRequest,
    LeaveProjectUseCase,
    RemoveCollaboratorRequest,
    RemoveCollaboratorUseCase,
    UpdateRoleRequest,
    UpdateRoleUseCase,
)
from .respond_invitation import (
    AcceptInvitationUseCase,
    CollaboratorInfo,
    InvitationResponseRequest,
    RejectInvitationUseCase,
)

__all__ = [
    "AcceptInvitationUseCase",
    "CollaboratorInfo",
    "InvitationInfo",
    "InvitationResponseRequest",
    "InviteCollaboratorRequest",
    "InviteCollaboratorUseCase",
    "LeaveProjectRequest",
    "LeaveProjectUseCase",
    "ListCollaboratorsRequest",
    "ListCollaboratorsResponse",
    "ListCollaboratorsUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "RejectInvitationUseCase",
    "RemoveCollaboratorRequest",
    "RemoveCollaboratorUseCase",
    "UpdateRoleRequest",
    "UpdateRoleUseCase",
]
