"""PostgreSQL implementation of Collaboration repository.

Collaborators and invitations are keyed by (project_id, user_id); a
duplicate insert surfaces as the driver's IntegrityError.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Collaborator, Invitation
from folio.domain.repository import CollaborationRepository
from folio.domain.value import CollaboratorRole, ProjectId, UserId
from folio.persistence.mappers import row_to_collaborator, row_to_invitation
from folio.persistence.tables import collaborators_table, invitations_table


class PostgresCollaborationRepository(CollaborationRepository):
    """PostgreSQL implementation of CollaborationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_collaborator(
        self, project_id: ProjectId, user_id: UserId
    ) -> Optional[Collaborator]:
        stmt = select(collaborators_table).where(
            collaborators_table.c.project_id == project_id,
            collaborators_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_collaborator(dict(row)) if row else None

    async def find_collaborators(self, project_id: ProjectId) -> List[Collaborator]:
        stmt = (
            select(collaborators_table)
            .where(collaborators_table.c.project_id == project_id)
            .order_by(collaborators_table.c.added_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_collaborator(dict(row)) for row in result.mappings().all()]

    async def find_projects_for_collaborator(self, user_id: UserId) -> List[ProjectId]:
        stmt = select(collaborators_table.c.project_id).where(
            collaborators_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return [ProjectId(row.project_id) for row in result.all()]

    async def add_collaborator(self, collaborator: Collaborator) -> Collaborator:
        data = collaborator.model_dump()
        data["role"] = collaborator.role.value
        await self.session.execute(collaborators_table.insert().values(**data))
        await self.session.flush()
        return collaborator

    async def update_role(
        self, project_id: ProjectId, user_id: UserId, role: CollaboratorRole
    ) -> Optional[Collaborator]:
        stmt = (
            collaborators_table.update()
            .where(
                collaborators_table.c.project_id == project_id,
                collaborators_table.c.user_id == user_id,
            )
            .values(role=role.value)
            .returning(*collaborators_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_collaborator(dict(row)) if row else None

    async def remove_collaborator(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = (
            delete(collaborators_table)
            .where(
                collaborators_table.c.project_id == project_id,
                collaborators_table.c.user_id == user_id,
            )
            .returning(collaborators_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed

    async def find_invitation(
        self, project_id: ProjectId, user_id: UserId
    ) -> Optional[Invitation]:
        stmt = select(invitations_table).where(
            invitations_table.c.project_id == project_id,
            invitations_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_invitations_for_user(self, user_id: UserId) -> List[Invitation]:
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.user_id == user_id)
            .order_by(invitations_table.c.invited_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def add_invitation(self, invitation: Invitation) -> Invitation:
        data = invitation.model_dump()
        data["role"] = invitation.role.value
        await self.session.execute(invitations_table.insert().values(**data))
        await self.session.flush()
        return invitation

    async def remove_invitation(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = (
            delete(invitations_table)
            .where(
                invitations_table.c.project_id == project_id,
                invitations_table.c.user_id == user_id,
            )
            .returning(invitations_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed
