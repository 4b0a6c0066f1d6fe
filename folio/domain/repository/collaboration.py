"""Collaboration repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.project import Collaborator, Invitation
from folio.domain.value import CollaboratorRole, ProjectId, UserId


class CollaborationRepository(ABC):
    """Repository for project collaborators and pending invitations.

    Both sets are keyed by (project, user); inserting a duplicate pair
    raises IntegrityError.
    """

    @abstractmethod
    async def find_collaborator(
        self, project_id: ProjectId, user_id: UserId
    ) -> Optional[Collaborator]:
        pass

    @abstractmethod
    async def find_collaborators(self, project_id: ProjectId) -> List[Collaborator]:
        """List a project's collaborators in the order they joined."""
        pass

    @abstractmethod
    async def find_projects_for_collaborator(self, user_id: UserId) -> List[ProjectId]:
        """IDs of projects the user collaborates on."""
        pass

    @abstractmethod
    async def add_collaborator(self, collaborator: Collaborator) -> Collaborator:
        """Add a collaborator.

        Raises:
            IntegrityError: If the user already collaborates on the project
        """
        pass

    @abstractmethod
    async def update_role(
        self, project_id: ProjectId, user_id: UserId, role: CollaboratorRole
    ) -> Optional[Collaborator]:
        """Change a collaborator's role.

        Returns:
            The updated collaborator, or None if the user is not a collaborator
        """
        pass

    @abstractmethod
    async def remove_collaborator(self, project_id: ProjectId, user_id: UserId) -> bool:
        pass

    @abstractmethod
    async def find_invitation(
        self, project_id: ProjectId, user_id: UserId
    ) -> Optional[Invitation]:
        pass

    @abstractmethod
    async def find_invitations_for_user(self, user_id: UserId) -> List[Invitation]:
        """Pending invitations addressed to a user, newest first."""
        pass

    @abstractmethod
    async def add_invitation(self, invitation: Invitation) -> Invitation:
        """Store a pending invitation.

        Raises:
            IntegrityError: If the user already has a pending invitation
        """
        pass

    @abstractmethod
    async def remove_invitation(self, project_id: ProjectId, user_id: UserId) -> bool:
        """Consume a pending invitation. Returns False if none was pending."""
        pass
