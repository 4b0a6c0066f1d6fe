"""PostgreSQL implementation of Relationship repository.

Edges are inserted with ``ON CONFLICT DO NOTHING ... RETURNING`` so that
concurrent follows of the same pair insert exactly once and the caller
learns whether its request created the edge.
"""

from typing import Dict, List, Sequence

from sqlalchemy import Table, and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.repository import RelationshipRepository
from folio.domain.value import UserId
from folio.persistence.tables import blocks_table, follow_requests_table, follows_table


class PostgresRelationshipRepository(RelationshipRepository):
    """PostgreSQL implementation of RelationshipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _add_edge(self, table: Table, **values) -> bool:
        first = next(iter(values))
        stmt = (
            insert(table)
            .values(**values)
            .on_conflict_do_nothing()
            .returning(table.c[first])
        )
        result = await self.session.execute(stmt)
        created = result.first() is not None
        await self.session.flush()
        return created

    async def _remove_edge(self, table: Table, **values) -> bool:
        first = next(iter(values))
        stmt = (
            delete(table)
            .where(and_(*[table.c[key] == value for key, value in values.items()]))
            .returning(table.c[first])
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed

    async def _has_edge(self, table: Table, **values) -> bool:
        stmt = select(func.count()).select_from(table).where(
            and_(*[table.c[key] == value for key, value in values.items()])
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    # Follow edges

    async def add_follow(self, follower_id: UserId, followee_id: UserId) -> bool:
        return await self._add_edge(
            follows_table, follower_id=follower_id, followee_id=followee_id
        )

    async def remove_follow(self, follower_id: UserId, followee_id: UserId) -> bool:
        return await self._remove_edge(
            follows_table, follower_id=follower_id, followee_id=followee_id
        )

    async def is_following(self, follower_id: UserId, followee_id: UserId) -> bool:
        return await self._has_edge(
            follows_table, follower_id=follower_id, followee_id=followee_id
        )

    async def find_followers(self, user_id: UserId) -> List[UserId]:
        stmt = (
            select(follows_table.c.follower_id)
            .where(follows_table.c.followee_id == user_id)
            .order_by(follows_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [UserId(row.follower_id) for row in result.all()]

    async def find_following(self, user_id: UserId) -> List[UserId]:
        stmt = (
            select(follows_table.c.followee_id)
            .where(follows_table.c.follower_id == user_id)
            .order_by(follows_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [UserId(row.followee_id) for row in result.all()]

    async def count_followers(self, user_ids: Sequence[UserId]) -> Dict[UserId, int]:
        counts: Dict[UserId, int] = {user_id: 0 for user_id in user_ids}
        if not user_ids:
            return counts
        stmt = (
            select(follows_table.c.followee_id, func.count().label("followers"))
            .where(follows_table.c.followee_id.in_(list(user_ids)))
            .group_by(follows_table.c.followee_id)
        )
        result = await self.session.execute(stmt)
        for row in result.all():
            counts[UserId(row.followee_id)] = row.followers
        return counts

    # Follow requests

    async def add_follow_request(self, requester_id: UserId, target_id: UserId) -> bool:
        return await self._add_edge(
            follow_requests_table, requester_id=requester_id, target_id=target_id
        )

    async def remove_follow_request(
        self, requester_id: UserId, target_id: UserId
    ) -> bool:
        return await self._remove_edge(
            follow_requests_table, requester_id=requester_id, target_id=target_id
        )

    async def has_follow_request(self, requester_id: UserId, target_id: UserId) -> bool:
        return await self._has_edge(
            follow_requests_table, requester_id=requester_id, target_id=target_id
        )

    async def find_follow_requests(self, target_id: UserId) -> List[UserId]:
        stmt = (
            select(follow_requests_table.c.requester_id)
            .where(follow_requests_table.c.target_id == target_id)
            .order_by(follow_requests_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [UserId(row.requester_id) for row in result.all()]

    # Blocks

    async def add_block(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        return await self._add_edge(
            blocks_table, blocker_id=blocker_id, blocked_id=blocked_id
        )

    async def remove_block(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        return await self._remove_edge(
            blocks_table, blocker_id=blocker_id, blocked_id=blocked_id
        )

    async def is_blocked(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        return await self._has_edge(
            blocks_table, blocker_id=blocker_id, blocked_id=blocked_id
        )

    async def find_blocked(self, blocker_id: UserId) -> List[UserId]:
        stmt = (
            select(blocks_table.c.blocked_id)
            .where(blocks_table.c.blocker_id == blocker_id)
            .order_by(blocks_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [UserId(row.blocked_id) for row in result.all()]
