"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from folio.domain.model import Comment
from folio.domain.repository import CommentRepository
from folio.domain.value import CommentId, ProjectId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_project(self, project_id: ProjectId) -> list[Comment]:
        return sorted(
            (c for c in self._store.comments.values() if c.project_id == project_id),
            key=lambda c: c.created_at,
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        if self._store.comments.pop(comment_id, None) is None:
            return False
        self._store.comment_likes = {
            key: at
            for key, at in self._store.comment_likes.items()
            if key[0] != comment_id
        }
        return True

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        key = (comment_id, user_id)
        if key in self._store.comment_likes:
            return False
        self._store.comment_likes[key] = datetime.now()
        return True

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        return self._store.comment_likes.pop((comment_id, user_id), None) is not None

    async def count_likes(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        counts = {comment_id: 0 for comment_id in comment_ids}
        for comment_id, _ in self._store.comment_likes:
            if comment_id in counts:
                counts[comment_id] += 1
        return counts
