"""In-memory project repository for testing."""

from collections import Counter
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from folio.domain.model import Project
from folio.domain.repository import ProjectRepository
from folio.domain.value import ProjectId, ProjectVisibility, Slug, TagName, UserId

from .store import InMemoryStore


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _newest_first(self, projects) -> list[Project]:
        return sorted(projects, key=lambda p: p.created_at, reverse=True)

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return self._store.projects.get(project_id)

    async def find_by_ids(self, project_ids: Sequence[ProjectId]) -> list[Project]:
        return [
            self._store.projects[pid]
            for pid in set(project_ids)
            if pid in self._store.projects
        ]

    async def find_by_slug(self, slug: Slug) -> Optional[Project]:
        for project in self._store.projects.values():
            if project.slug == slug:
                return project
        return None

    async def find_by_owner(self, owner_id: UserId) -> list[Project]:
        return self._newest_first(
            p for p in self._store.projects.values() if p.owner_id == owner_id
        )

    async def find_by_owners(
        self, owner_ids: Sequence[UserId], limit: int
    ) -> list[Project]:
        owners = set(owner_ids)
        return self._newest_first(
            p for p in self._store.projects.values() if p.owner_id in owners
        )[:limit]

    def _discoverable(
        self, query: Optional[str], tag: Optional[TagName]
    ) -> list[Project]:
        matches = []
        for project in self._store.projects.values():
            owner = self._store.users.get(project.owner_id)
            if project.visibility != ProjectVisibility.PUBLIC:
                continue
            if owner is None or owner.privacy.is_private or not owner.is_active:
                continue
            if query:
                needle = query.lower()
                haystacks = [project.title.lower(), (project.description or "").lower()]
                if not any(needle in text for text in haystacks):
                    continue
            if tag and tag not in project.tags:
                continue
            matches.append(project)
        return sorted(matches, key=lambda p: (-p.created_at.timestamp(), str(p.id)))

    async def find_discoverable(
        self,
        query: Optional[str] = None,
        tag: Optional[TagName] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Project]:
        matches = self._discoverable(query, tag)[offset:]
        return matches if limit is None else matches[:limit]

    async def count_discoverable(
        self, query: Optional[str] = None, tag: Optional[TagName] = None
    ) -> int:
        return len(self._discoverable(query, tag))

    async def popular_tags(self, limit: int) -> list[tuple[str, int]]:
        counts = Counter(
            tag.root for project in self._discoverable(None, None) for tag in project.tags
        )
        return sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:limit]

    async def save(self, project: Project) -> Project:
        """Save or update a project.

        Raises:
            IntegrityError: If another project holds the slug
        """
        for other in self._store.projects.values():
            if other.id != project.id and other.slug == project.slug:
                raise IntegrityError(
                    "Key (slug)=(%s) already exists" % project.slug, None, Exception()
                )
        self._store.projects[project.id] = project
        return project

    async def delete(self, project_id: ProjectId) -> bool:
        return self._store.delete_project(project_id)

    async def add_like(self, project_id: ProjectId, user_id: UserId) -> bool:
        key = (project_id, user_id)
        if key in self._store.project_likes:
            return False
        self._store.project_likes[key] = datetime.now()
        return True

    async def remove_like(self, project_id: ProjectId, user_id: UserId) -> bool:
        return self._store.project_likes.pop((project_id, user_id), None) is not None

    async def has_liked(self, project_id: ProjectId, user_id: UserId) -> bool:
        return (project_id, user_id) in self._store.project_likes

    async def count_likes(
        self, project_ids: Sequence[ProjectId]
    ) -> dict[ProjectId, int]:
        counts = {project_id: 0 for project_id in project_ids}
        for project_id, _ in self._store.project_likes:
            if project_id in counts:
                counts[project_id] += 1
        return counts

    async def add_save(self, project_id: ProjectId, user_id: UserId) -> bool:
        key = (user_id, project_id)
        if key in self._store.saved_projects:
            return False
        self._store.saved_projects[key] = datetime.now()
        return True

    async def remove_save(self, project_id: ProjectId, user_id: UserId) -> bool:
        return self._store.saved_projects.pop((user_id, project_id), None) is not None

    async def find_saved(self, user_id: UserId) -> list[Project]:
        return [
            self._store.projects[project_id]
            for uid, project_id in reversed(self._store.saved_projects)
            if uid == user_id and project_id in self._store.projects
        ]
