"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from folio.domain.model.comment import Comment
from folio.domain.value import CommentId, ProjectId, UserId


class CommentRepository(ABC):
    """Repository for project comments and their likes."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_project(self, project_id: ProjectId) -> List[Comment]:
        """List a project's comments, oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment and its likes.

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Add a user to the comment's like set. Returns False if already liked."""
        pass

    @abstractmethod
    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove a user from the comment's like set. Returns False if absent."""
        pass

    @abstractmethod
    async def count_likes(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Like counts for several comments; missing comments map to 0."""
        pass
