"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Comment
from folio.domain.repository import CommentRepository
from folio.domain.value import CommentId, ProjectId, UserId
from folio.persistence.mappers import row_to_comment
from folio.persistence.tables import comment_likes_table, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: Comment ID to look up

        Returns:
            Comment if found, None otherwise
        """
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_project(self, project_id: ProjectId) -> List[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.project_id == project_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        stmt = comments_table.insert().values(**comment.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment; its likes cascade."""
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id == comment_id)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        stmt = (
            insert(comment_likes_table)
            .values(comment_id=comment_id, user_id=user_id)
            .on_conflict_do_nothing()
            .returning(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        created = result.first() is not None
        await self.session.flush()
        return created

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        stmt = (
            delete(comment_likes_table)
            .where(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
            .returning(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed

    async def count_likes(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        counts: Dict[CommentId, int] = {comment_id: 0 for comment_id in comment_ids}
        if not comment_ids:
            return counts
        stmt = (
            select(comment_likes_table.c.comment_id, func.count().label("likes"))
            .where(comment_likes_table.c.comment_id.in_(list(comment_ids)))
            .group_by(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        for row in result.all():
            counts[CommentId(row.comment_id)] = row.likes
        return counts
