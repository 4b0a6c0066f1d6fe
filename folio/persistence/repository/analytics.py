"""PostgreSQL implementation of the analytics repositories.

Counters are bumped with ``INSERT ... ON CONFLICT DO UPDATE`` so the
statement is atomic under concurrent views and likes; decrements are
clamped at zero with ``GREATEST``.
"""

from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import ActivityEntry, DailyStats, ProjectEngagement
from folio.domain.repository import ActivityRepository, AnalyticsRepository
from folio.domain.value import ActivityAction, EngagementStats, ProjectId, UserId
from folio.persistence.mappers import row_to_activity
from folio.persistence.tables import (
    activity_logs_table,
    project_daily_stats_table,
    project_stats_table,
    project_viewers_table,
)


class PostgresAnalyticsRepository(AnalyticsRepository):
    """PostgreSQL implementation of AnalyticsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _increment(self, project_id: ProjectId, counter: str, day: date) -> None:
        totals = insert(project_stats_table).values(
            project_id=project_id, **{counter: 1}
        )
        totals = totals.on_conflict_do_update(
            index_elements=[project_stats_table.c.project_id],
            set_={
                counter: project_stats_table.c[counter] + 1,
                "last_updated": func.now(),
            },
        )
        await self.session.execute(totals)

        daily = insert(project_daily_stats_table).values(
            project_id=project_id, day=day, **{counter: 1}
        )
        daily = daily.on_conflict_do_update(
            index_elements=[
                project_daily_stats_table.c.project_id,
                project_daily_stats_table.c.day,
            ],
            set_={counter: project_daily_stats_table.c[counter] + 1},
        )
        await self.session.execute(daily)
        await self.session.flush()

    async def _decrement(self, project_id: ProjectId, counter: str) -> None:
        column = project_stats_table.c[counter]
        stmt = (
            update(project_stats_table)
            .where(project_stats_table.c.project_id == project_id)
            .values({counter: func.greatest(column - 1, 0), "last_updated": func.now()})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def record_view(
        self, project_id: ProjectId, viewer_id: Optional[UserId], day: date
    ) -> None:
        await self._increment(project_id, "views", day)
        if viewer_id:
            stmt = (
                insert(project_viewers_table)
                .values(project_id=project_id, user_id=viewer_id)
                .on_conflict_do_nothing()
            )
            await self.session.execute(stmt)
            await self.session.flush()

    async def record_like(self, project_id: ProjectId, day: date) -> None:
        await self._increment(project_id, "likes", day)

    async def record_unlike(self, project_id: ProjectId) -> None:
        await self._decrement(project_id, "likes")

    async def record_comment(self, project_id: ProjectId, day: date) -> None:
        await self._increment(project_id, "comments", day)

    async def record_comment_removed(self, project_id: ProjectId) -> None:
        await self._decrement(project_id, "comments")

    async def find_engagement(
        self, project_ids: Sequence[ProjectId]
    ) -> Dict[ProjectId, ProjectEngagement]:
        engagement = {
            project_id: ProjectEngagement(project_id=project_id)
            for project_id in project_ids
        }
        if not project_ids:
            return engagement

        viewers = (
            select(
                project_viewers_table.c.project_id,
                func.count().label("unique_viewers"),
            )
            .where(project_viewers_table.c.project_id.in_(list(project_ids)))
            .group_by(project_viewers_table.c.project_id)
        )
        unique: Dict[ProjectId, int] = {
            ProjectId(row.project_id): row.unique_viewers
            for row in (await self.session.execute(viewers)).all()
        }

        stmt = select(project_stats_table).where(
            project_stats_table.c.project_id.in_(list(project_ids))
        )
        result = await self.session.execute(stmt)
        for row in result.mappings().all():
            project_id = ProjectId(row["project_id"])
            engagement[project_id] = ProjectEngagement(
                project_id=project_id,
                stats=EngagementStats(
                    views=row["views"], likes=row["likes"], comments=row["comments"]
                ),
                unique_viewers=unique.get(project_id, 0),
                last_updated=row["last_updated"],
            )
        return engagement

    async def find_daily(
        self, project_ids: Sequence[ProjectId], since: date
    ) -> List[DailyStats]:
        if not project_ids:
            return []
        stmt = (
            select(project_daily_stats_table)
            .where(
                project_daily_stats_table.c.project_id.in_(list(project_ids)),
                project_daily_stats_table.c.day >= since,
            )
            .order_by(project_daily_stats_table.c.day)
        )
        result = await self.session.execute(stmt)
        return [
            DailyStats(
                project_id=row["project_id"],
                day=row["day"],
                stats=EngagementStats(
                    views=row["views"], likes=row["likes"], comments=row["comments"]
                ),
            )
            for row in result.mappings().all()
        ]

    async def count_unique_viewers(self, project_ids: Sequence[ProjectId]) -> int:
        if not project_ids:
            return 0
        stmt = select(
            func.count(func.distinct(project_viewers_table.c.user_id))
        ).where(project_viewers_table.c.project_id.in_(list(project_ids)))
        result = await self.session.execute(stmt)
        return result.scalar_one()


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, entry: ActivityEntry) -> ActivityEntry:
        data = entry.model_dump()
        data["action"] = entry.action.value
        await self.session.execute(activity_logs_table.insert().values(**data))
        await self.session.flush()
        return entry

    async def find_by_user(
        self,
        user_id: UserId,
        limit: int,
        offset: int = 0,
        action: Optional[ActivityAction] = None,
    ) -> List[ActivityEntry]:
        stmt = select(activity_logs_table).where(
            activity_logs_table.c.user_id == user_id
        )
        if action:
            stmt = stmt.where(activity_logs_table.c.action == action.value)
        stmt = (
            stmt.order_by(activity_logs_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_activity(dict(row)) for row in result.mappings().all()]

    async def count_by_user(
        self, user_id: UserId, action: Optional[ActivityAction] = None
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(activity_logs_table)
            .where(activity_logs_table.c.user_id == user_id)
        )
        if action:
            stmt = stmt.where(activity_logs_table.c.action == action.value)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete_older_than(self, cutoff: datetime) -> int:
        stmt = (
            delete(activity_logs_table)
            .where(activity_logs_table.c.created_at < cutoff)
            .returning(activity_logs_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = len(result.all())
        await self.session.flush()
        return deleted
