"""PostgreSQL implementation of Project repository."""

from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

import logfire

from folio.domain.model import Project
from folio.domain.repository import ProjectRepository
from folio.domain.value import ProjectId, ProjectVisibility, Slug, TagName, UserId
from folio.persistence.mappers import project_to_dict, row_to_project
from folio.persistence.tables import (
    project_likes_table,
    projects_table,
    saved_projects_table,
    users_table,
)


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_all(self, stmt) -> List[Project]:
        result = await self.session.execute(stmt)
        return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_by_ids(self, project_ids: Sequence[ProjectId]) -> List[Project]:
        if not project_ids:
            return []
        stmt = select(projects_table).where(projects_table.c.id.in_(list(project_ids)))
        return await self._fetch_all(stmt)

    async def find_by_slug(self, slug: Slug) -> Optional[Project]:
        stmt = select(projects_table).where(projects_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_by_owner(self, owner_id: UserId) -> List[Project]:
        stmt = (
            select(projects_table)
            .where(projects_table.c.owner_id == owner_id)
            .order_by(projects_table.c.created_at.desc())
        )
        return await self._fetch_all(stmt)

    async def find_by_owners(
        self, owner_ids: Sequence[UserId], limit: int
    ) -> List[Project]:
        if not owner_ids:
            return []
        stmt = (
            select(projects_table)
            .where(projects_table.c.owner_id.in_(list(owner_ids)))
            .order_by(projects_table.c.created_at.desc())
            .limit(limit)
        )
        return await self._fetch_all(stmt)

    def _discoverable(self, query: Optional[str], tag: Optional[TagName]):
        """Public projects of public, active owners, filtered by text and tag."""
        conditions = [
            projects_table.c.visibility == ProjectVisibility.PUBLIC.value,
            users_table.c.is_private.is_(False),
            users_table.c.is_suspended.is_(False),
            users_table.c.is_banned.is_(False),
            users_table.c.is_deleted.is_(False),
        ]
        if query:
            conditions.append(
                or_(
                    projects_table.c.title.icontains(query, autoescape=True),
                    projects_table.c.description.icontains(query, autoescape=True),
                )
            )
        if tag:
            conditions.append(projects_table.c.tags.contains([tag.root]))
        return projects_table.join(
            users_table, users_table.c.id == projects_table.c.owner_id
        ), and_(*conditions)

    async def find_discoverable(
        self,
        query: Optional[str] = None,
        tag: Optional[TagName] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Project]:
        joined, condition = self._discoverable(query, tag)
        stmt = (
            select(projects_table)
            .select_from(joined)
            .where(condition)
            .order_by(projects_table.c.created_at.desc(), projects_table.c.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._fetch_all(stmt)

    async def count_discoverable(
        self, query: Optional[str] = None, tag: Optional[TagName] = None
    ) -> int:
        joined, condition = self._discoverable(query, tag)
        stmt = select(func.count()).select_from(joined).where(condition)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def popular_tags(self, limit: int) -> List[Tuple[str, int]]:
        joined, condition = self._discoverable(None, None)
        tags = (
            select(func.unnest(projects_table.c.tags).label("tag"))
            .select_from(joined)
            .where(condition)
            .subquery()
        )
        count = func.count().label("count")
        stmt = (
            select(tags.c.tag, count)
            .group_by(tags.c.tag)
            .order_by(count.desc(), tags.c.tag)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(row.tag, row.count) for row in result.all()]

    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        project_dict = project_to_dict(project)
        existing = await self.find_by_id(project.id)
        if existing:
            stmt = (
                projects_table.update()
                .where(projects_table.c.id == project.id)
                .values(**project_dict)
            )
        else:
            stmt = projects_table.insert().values(**project_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return project

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project; comments, likes, bookmarks and stats cascade."""
        stmt = (
            delete(projects_table)
            .where(projects_table.c.id == project_id)
            .returning(projects_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        if deleted:
            logfire.info("Project row deleted", project_id=str(project_id))
        return deleted

    # Likes

    async def add_like(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = (
            insert(project_likes_table)
            .values(project_id=project_id, user_id=user_id)
            .on_conflict_do_nothing()
            .returning(project_likes_table.c.project_id)
        )
        result = await self.session.execute(stmt)
        created = result.first() is not None
        await self.session.flush()
        return created

    async def remove_like(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = (
            delete(project_likes_table)
            .where(
                project_likes_table.c.project_id == project_id,
                project_likes_table.c.user_id == user_id,
            )
            .returning(project_likes_table.c.project_id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed

    async def has_liked(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = select(func.count()).select_from(project_likes_table).where(
            project_likes_table.c.project_id == project_id,
            project_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def count_likes(
        self, project_ids: Sequence[ProjectId]
    ) -> Dict[ProjectId, int]:
        counts: Dict[ProjectId, int] = {project_id: 0 for project_id in project_ids}
        if not project_ids:
            return counts
        stmt = (
            select(project_likes_table.c.project_id, func.count().label("likes"))
            .where(project_likes_table.c.project_id.in_(list(project_ids)))
            .group_by(project_likes_table.c.project_id)
        )
        result = await self.session.execute(stmt)
        for row in result.all():
            counts[ProjectId(row.project_id)] = row.likes
        return counts

    # Bookmarks

    async def add_save(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = (
            insert(saved_projects_table)
            .values(project_id=project_id, user_id=user_id)
            .on_conflict_do_nothing()
            .returning(saved_projects_table.c.project_id)
        )
        result = await self.session.execute(stmt)
        created = result.first() is not None
        await self.session.flush()
        return created

    async def remove_save(self, project_id: ProjectId, user_id: UserId) -> bool:
        stmt = (
            delete(saved_projects_table)
            .where(
                saved_projects_table.c.project_id == project_id,
                saved_projects_table.c.user_id == user_id,
            )
            .returning(saved_projects_table.c.project_id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed

    async def find_saved(self, user_id: UserId) -> List[Project]:
        stmt = (
            select(projects_table)
            .select_from(
                projects_table.join(
                    saved_projects_table,
                    saved_projects_table.c.project_id == projects_table.c.id,
                )
            )
            .where(saved_projects_table.c.user_id == user_id)
            .order_by(saved_projects_table.c.created_at.desc())
        )
        return await self._fetch_all(stmt)
