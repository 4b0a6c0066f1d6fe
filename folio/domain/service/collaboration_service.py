"""Collaboration domain service.

Invitation workflow per (project, invitee) pair:

    pending --accept--> collaborator with the invited role
    pending --reject--> gone

Only the project owner invites, changes roles and removes collaborators.
A collaborator may leave on their own.
"""

import logfire

from folio.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from folio.domain.model import Collaborator, Invitation, Project, User
from folio.domain.repository import CollaborationRepository, UserRepository
from folio.domain.value import (
    ActivityAction,
    CollaboratorRole,
    NotificationType,
    ProjectId,
    UserId,
)

from .analytics_service import AnalyticsService
from .base import Service
from .notification_service import NotificationService
from .project_service import ProjectService
from .user_service import UserService


class CollaborationService(Service):
    """Domain service for project collaborators and invitations."""

    def __init__(
        self,
        collaboration_repository: CollaborationRepository,
        user_repository: UserRepository,
        user_service: UserService,
        project_service: ProjectService,
        notification_service: NotificationService,
        analytics_service: AnalyticsService,
    ) -> None:
        """Initialize collaboration service.

        Args:
            collaboration_repository: Collaborator/invitation repository
            user_repository: User repository
            user_service: User domain service
            project_service: Project lookups
            notification_service: Notification domain service
            analytics_service: Activity log
        """
        self.collaboration_repository = collaboration_repository
        self.user_repository = user_repository
        self.user_service = user_service
        self.project_service = project_service
        self.notification_service = notification_service
        self.analytics_service = analytics_service

    async def _get_owned_project(self, project_id: ProjectId, user: User) -> Project:
        project = await self.project_service.get_by_id(project_id)
        if project.owner_id != user.id:
            raise NotAuthorizedError("project collaborators", str(project_id), str(user.id))
        return project

    async def _find_invitee(
        self,
        user_id: UserId | None,
        username: str | None,
        email: str | None,
    ) -> User:
        if user_id:
            return await self.user_service.get_by_id(user_id)
        if username:
            return await self.user_service.get_by_username(username)
        if email:
            user = await self.user_repository.find_by_email(email.strip().lower())
            if not user:
                raise NotFoundError("User", email)
            return user
        raise ValidationError("A user ID, username or email is required")

    async def invite(
        self,
        project_id: ProjectId,
        inviter: User,
        user_id: UserId | None = None,
        username: str | None = None,
        email: str | None = None,
        role: CollaboratorRole = CollaboratorRole.VIEWER,
    ) -> tuple[Invitation, User]:
        """Invite a user to collaborate on a project.

        The invitee is looked up by ID, then username, then email.

        Returns:
            The pending invitation and the invited user

        Raises:
            NotFoundError: If the project or invitee does not exist
            NotAuthorizedError: If the inviter does not own the project
            ValidationError: If no invitee is named or the invitee is the owner
            ConflictError: If the invitee already collaborates or is invited
        """
        with logfire.span(
            "collaboration_service.invite",
            project_id=str(project_id),
            inviter_id=str(inviter.id),
        ):
            project = await self._get_owned_project(project_id, inviter)
            invitee = await self._find_invitee(user_id, username, email)

            if invitee.id == project.owner_id:
                raise ValidationError("The owner already has full access to the project")

            repo = self.collaboration_repository
            if await repo.find_collaborator(project.id, invitee.id):
                raise ConflictError("This user is already a collaborator")
            if await repo.find_invitation(project.id, invitee.id):
                raise ConflictError("This user already has a pending invitation")

            invitation = await repo.add_invitation(
                Invitation(
                    project_id=project.id,
                    user_id=invitee.id,
                    role=role,
                    invited_by=inviter.id,
                )
            )
            await self.notification_service.notify(
                invitee.id,
                inviter.id,
                NotificationType.INVITATION,
                f"{inviter.username} invited you to collaborate on \"{project.title}\"",
                project_id=project.id,
            )
            logfire.info(
                "Collaborator invited",
                project_id=str(project.id),
                invitee_id=str(invitee.id),
                role=role.value,
            )
            return invitation, invitee

    async def _take_invitation(self, project: Project, user: User) -> Invitation:
        invitation = await self.collaboration_repository.find_invitation(
            project.id, user.id
        )
        if not invitation:
            raise NotFoundError("Invitation", str(project.id))
        await self.collaboration_repository.remove_invitation(project.id, user.id)
        return invitation

    async def accept(self, project_id: ProjectId, user: User) -> Collaborator:
        """Accept a pending invitation, joining with the invited role.

        Raises:
            NotFoundError: If the project or invitation does not exist
        """
        with logfire.span(
            "collaboration_service.accept",
            project_id=str(project_id),
            user_id=str(user.id),
        ):
            project = await self.project_service.get_by_id(project_id)
            invitation = await self._take_invitation(project, user)

            collaborator = await self.collaboration_repository.add_collaborator(
                Collaborator(
                    project_id=project.id,
                    user_id=user.id,
                    role=invitation.role,
                    added_by=invitation.invited_by,
                )
            )
            await self.notification_service.notify(
                invitation.invited_by,
                user.id,
                NotificationType.INVITATION_ACCEPTED,
                f"{user.username} accepted your invitation to \"{project.title}\"",
                project_id=project.id,
            )
            await self.analytics_service.log_activity(
                invitation.invited_by,
                ActivityAction.COLLABORATOR_ADDED,
                project,
                target_user_id=user.id,
            )
            logfire.info(
                "Invitation accepted",
                project_id=str(project.id),
                user_id=str(user.id),
                role=invitation.role.value,
            )
            return collaborator

    async def reject(self, project_id: ProjectId, user: User) -> None:
        """Reject a pending invitation.

        Raises:
            NotFoundError: If the project or invitation does not exist
        """
        project = await self.project_service.get_by_id(project_id)
        invitation = await self._take_invitation(project, user)
        await self.notification_service.notify(
            invitation.invited_by,
            user.id,
            NotificationType.INVITATION_REJECTED,
            f"{user.username} declined your invitation to \"{project.title}\"",
            project_id=project.id,
        )
        logfire.info(
            "Invitation rejected", project_id=str(project.id), user_id=str(user.id)
        )

    async def update_role(
        self,
        project_id: ProjectId,
        owner: User,
        user_id: UserId,
        role: CollaboratorRole,
    ) -> Collaborator:
        """Change a collaborator's role.

        Raises:
            NotAuthorizedError: If the caller does not own the project
            NotFoundError: If the user is not a collaborator
        """
        project = await self._get_owned_project(project_id, owner)
        updated = await self.collaboration_repository.update_role(
            project.id, user_id, role
        )
        if not updated:
            raise NotFoundError("Collaborator", str(user_id))
        logfire.info(
            "Collaborator role updated",
            project_id=str(project.id),
            user_id=str(user_id),
            role=role.value,
        )
        return updated

    async def remove(self, project_id: ProjectId, owner: User, user_id: UserId) -> None:
        """Remove a collaborator from an owned project.

        Raises:
            NotAuthorizedError: If the caller does not own the project
            NotFoundError: If the user is not a collaborator
        """
        project = await self._get_owned_project(project_id, owner)
        if not await self.collaboration_repository.remove_collaborator(
            project.id, user_id
        ):
            raise NotFoundError("Collaborator", str(user_id))
        await self.analytics_service.log_activity(
            owner.id,
            ActivityAction.COLLABORATOR_REMOVED,
            project,
            target_user_id=user_id,
        )
        logfire.info(
            "Collaborator removed", project_id=str(project.id), user_id=str(user_id)
        )

    async def leave(self, project_id: ProjectId, user: User) -> None:
        """Leave a project you collaborate on.

        Raises:
            ValidationError: If the user is not a collaborator
        """
        project = await self.project_service.get_by_id(project_id)
        if not await self.collaboration_repository.remove_collaborator(
            project.id, user.id
        ):
            raise ValidationError("You are not a collaborator on this project")
        logfire.info("Collaborator left", project_id=str(project.id), user_id=str(user.id))

    async def list_collaborators(
        self, project_id: ProjectId, viewer: User | None
    ) -> tuple[Project, list[Collaborator]]:
        """Collaborators of a project the viewer can see."""
        project = await self.project_service.get_by_id(project_id)
        await self.project_service.ensure_can_view(project, viewer)
        collaborators = await self.collaboration_repository.find_collaborators(
            project.id
        )
        return project, collaborators

    async def list_invitations(self, user_id: UserId) -> list[Invitation]:
        return await self.collaboration_repository.find_invitations_for_user(user_id)
