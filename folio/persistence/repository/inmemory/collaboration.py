"""In-memory collaboration repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from folio.domain.model import Collaborator, Invitation
from folio.domain.repository import CollaborationRepository
from folio.domain.value import CollaboratorRole, ProjectId, UserId

from .store import InMemoryStore


class InMemoryCollaborationRepository(CollaborationRepository):
    """In-memory implementation of CollaborationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_collaborator(
        self, project_id: ProjectId, user_id: UserId
    ) -> Optional[Collaborator]:
        return self._store.collaborators.get((project_id, user_id))

    async def find_collaborators(self, project_id: ProjectId) -> list[Collaborator]:
        return [
            c for (pid, _), c in self._store.collaborators.items() if pid == project_id
        ]

    async def find_projects_for_collaborator(self, user_id: UserId) -> list[ProjectId]:
        return [pid for (pid, uid) in self._store.collaborators if uid == user_id]

    async def add_collaborator(self, collaborator: Collaborator) -> Collaborator:
        """Add a collaborator.

        Raises:
            IntegrityError: If the user already collaborates on the project
        """
        key = (collaborator.project_id, collaborator.user_id)
        if key in self._store.collaborators:
            raise IntegrityError("Duplicate collaborator", None, Exception())
        self._store.collaborators[key] = collaborator
        return collaborator

    async def update_role(
        self, project_id: ProjectId, user_id: UserId, role: CollaboratorRole
    ) -> Optional[Collaborator]:
        collaborator = self._store.collaborators.get((project_id, user_id))
        if collaborator is None:
            return None
        updated = collaborator.model_copy(update={"role": role})
        self._store.collaborators[(project_id, user_id)] = updated
        return updated

    async def remove_collaborator(self, project_id: ProjectId, user_id: UserId) -> bool:
        return self._store.collaborators.pop((project_id, user_id), None) is not None

    async def find_invitation(
        self, project_id: ProjectId, user_id: UserId
    ) -> Optional[Invitation]:
        return self._store.invitations.get((project_id, user_id))

    async def find_invitations_for_user(self, user_id: UserId) -> list[Invitation]:
        return [
            i
            for (_, uid), i in reversed(self._store.invitations.items())
            if uid == user_id
        ]

    async def add_invitation(self, invitation: Invitation) -> Invitation:
        """Store a pending invitation.

        Raises:
            IntegrityError: If the user already has a pending invitation
        """
        key = (invitation.project_id, invitation.user_id)
        if key in self._store.invitations:
            raise IntegrityError("Duplicate invitation", None, Exception())
        self._store.invitations[key] = invitation
        return invitation

    async def remove_invitation(self, project_id: ProjectId, user_id: UserId) -> bool:
        return self._store.invitations.pop((project_id, user_id), None) is not None
