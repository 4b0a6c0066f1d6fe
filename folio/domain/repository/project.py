"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

from folio.domain.model.project import Project
from folio.domain.value import ProjectId, Slug, TagName, UserId


class ProjectRepository(ABC):
    """Repository for Project aggregate, its likes and bookmarks.

    Defines the contract for project persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, project_ids: Sequence[ProjectId]) -> List[Project]:
        """Find several projects at once (batch query)."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Project]:
        """Find a project by its unique slug."""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Project]:
        """List a user's projects, newest first.

        Args:
            owner_id: Project owner

        Returns:
            Projects owned by the user
        """
        pass

    @abstractmethod
    async def find_by_owners(
        self, owner_ids: Sequence[UserId], limit: int
    ) -> List[Project]:
        """List projects from several owners, newest first (following feed)."""
        pass

    @abstractmethod
    async def find_discoverable(
        self,
        query: Optional[str] = None,
        tag: Optional[TagName] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Project]:
        """List public projects whose owners are public and active.

        Args:
            query: Case-insensitive substring of title or description
            tag: Only projects carrying this tag
            limit: Maximum number of projects (None for all)
            offset: Number of projects to skip

        Returns:
            Matching projects, newest first
        """
        pass

    @abstractmethod
    async def count_discoverable(
        self, query: Optional[str] = None, tag: Optional[TagName] = None
    ) -> int:
        """Count projects matched by ``find_discoverable``."""
        pass

    @abstractmethod
    async def popular_tags(self, limit: int) -> List[Tuple[str, int]]:
        """Most used tags across discoverable projects.

        Returns:
            (tag, project count) pairs, most used first
        """
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        Raises:
            IntegrityError: If the slug is already taken
        """
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project with its comments, likes, bookmarks and analytics.

        Returns:
            True if a project was deleted
        """
        pass

    # Likes

    @abstractmethod
    async def add_like(self, project_id: ProjectId, user_id: UserId) -> bool:
        """Add a user to the project's like set.

        Returns:
            True if added, False if the user already liked the project
        """
        pass

    @abstractmethod
    async def remove_like(self, project_id: ProjectId, user_id: UserId) -> bool:
        """Remove a user from the project's like set.

        Returns:
            True if removed, False if the user had not liked the project
        """
        pass

    @abstractmethod
    async def has_liked(self, project_id: ProjectId, user_id: UserId) -> bool:
        pass

    @abstractmethod
    async def count_likes(
        self, project_ids: Sequence[ProjectId]
    ) -> Dict[ProjectId, int]:
        """Like counts for several projects; missing projects map to 0."""
        pass

    # Bookmarks

    @abstractmethod
    async def add_save(self, project_id: ProjectId, user_id: UserId) -> bool:
        """Bookmark a project for a user. Returns False if already saved."""
        pass

    @abstractmethod
    async def remove_save(self, project_id: ProjectId, user_id: UserId) -> bool:
        """Remove a bookmark. Returns False if it did not exist."""
        pass

    @abstractmethod
    async def find_saved(self, user_id: UserId) -> List[Project]:
        """Projects a user bookmarked, most recently saved first."""
        pass
