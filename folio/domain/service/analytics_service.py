"""Engagement analytics domain service.

Counts views, likes and comments per project (all-time and per day),
keeps the user activity log, and builds the owner-facing summaries.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from uuid import uuid4

import logfire

from folio.config import AnalyticsSettings
from folio.domain.error import NotAuthorizedError
from folio.domain.model import (
    ActivityEntry,
    DailyStats,
    Project,
    ProjectEngagement,
    User,
)
from folio.domain.repository import (
    ActivityRepository,
    AnalyticsRepository,
    ProjectRepository,
)
from folio.domain.value import (
    ActivityAction,
    ActivityId,
    EngagementStats,
    ProjectId,
    UserId,
)

from .base import Service


@dataclass
class ProjectAnalytics:
    """All-time counters plus the recent daily series for one project."""

    project: Project
    engagement: ProjectEngagement
    daily: list[DailyStats]


@dataclass
class Dashboard:
    """Summary of a user's own projects."""

    total_projects: int
    totals: EngagementStats
    unique_viewers: int
    top_projects: list[tuple[Project, ProjectEngagement]]
    recent_activity: list[ActivityEntry]
    daily_views: list[tuple[date, int]] = field(default_factory=list)


@dataclass
class Audience:
    """Who engages with a user's projects."""

    total_unique_viewers: int
    total_views: int
    total_likes: int
    total_comments: int
    avg_engagement_rate: float
    project_engagement: list[tuple[ProjectId, int]]


def rank_by_popularity(
    pairs: list[tuple[Project, ProjectEngagement]],
) -> list[tuple[Project, ProjectEngagement]]:
    """Order (project, engagement) pairs by score, then title, then id."""
    return sorted(
        pairs,
        key=lambda pair: (
            -pair[1].stats.popularity_score,
            pair[0].title.lower(),
            str(pair[0].id),
        ),
    )


class AnalyticsService(Service):
    """Domain service for engagement counters and the activity log."""

    def __init__(
        self,
        analytics_repository: AnalyticsRepository,
        activity_repository: ActivityRepository,
        project_repository: ProjectRepository,
        analytics_settings: AnalyticsSettings,
    ) -> None:
        """Initialize analytics service.

        Args:
            analytics_repository: Engagement counter repository
            activity_repository: Activity log repository
            project_repository: Project repository
            analytics_settings: Window and list sizes
        """
        self.analytics_repository = analytics_repository
        self.activity_repository = activity_repository
        self.project_repository = project_repository
        self.settings = analytics_settings

    # Activity log

    async def log_activity(
        self,
        user_id: UserId,
        action: ActivityAction,
        project: Project | None = None,
        target_user_id: UserId | None = None,
        description: str | None = None,
    ) -> ActivityEntry:
        """Append an entry to the user's activity log."""
        entry = ActivityEntry(
            id=ActivityId(uuid4()),
            user_id=user_id,
            action=action,
            project_id=project.id if project else None,
            project_title=project.title if project else None,
            target_user_id=target_user_id,
            description=description,
        )
        return await self.activity_repository.save(entry)

    async def get_activity(
        self,
        user_id: UserId,
        limit: int,
        skip: int,
        action: ActivityAction | None = None,
    ) -> tuple[list[ActivityEntry], int]:
        entries = await self.activity_repository.find_by_user(
            user_id, limit=limit, offset=skip, action=action
        )
        total = await self.activity_repository.count_by_user(user_id, action=action)
        return entries, total

    async def purge_expired_activity(self, now: datetime | None = None) -> int:
        """Delete activity entries older than the retention window.

        Returns:
            Number of entries deleted
        """
        now = now or datetime.now()
        cutoff = now - timedelta(days=self.settings.activity_retention_days)
        with logfire.span("analytics_service.purge_expired_activity", cutoff=cutoff):
            deleted = await self.activity_repository.delete_older_than(cutoff)
            logfire.info("Activity log purged", deleted=deleted)
            return deleted

    # Counters

    async def record_view(self, project: Project, viewer_id: UserId | None) -> None:
        """Count a view unless the owner is looking at their own project."""
        if viewer_id == project.owner_id:
            return
        await self.analytics_repository.record_view(project.id, viewer_id, date.today())
        if viewer_id:
            await self.log_activity(viewer_id, ActivityAction.PROJECT_VIEWED, project)
        logfire.info("View recorded", project_id=str(project.id))

    async def record_like(self, project_id: ProjectId) -> None:
        await self.analytics_repository.record_like(project_id, date.today())

    async def record_unlike(self, project_id: ProjectId) -> None:
        await self.analytics_repository.record_unlike(project_id)

    async def record_comment(self, project_id: ProjectId) -> None:
        await self.analytics_repository.record_comment(project_id, date.today())

    async def record_comment_removed(self, project_id: ProjectId) -> None:
        await self.analytics_repository.record_comment_removed(project_id)

    async def get_engagement(
        self, project_ids: list[ProjectId]
    ) -> dict[ProjectId, ProjectEngagement]:
        """All-time counters keyed by project; every requested ID is present."""
        if not project_ids:
            return {}
        return await self.analytics_repository.find_engagement(project_ids)

    # Owner reports

    async def get_project_analytics(
        self, project: Project, requester: User
    ) -> ProjectAnalytics:
        """Detailed analytics for one project.

        Raises:
            NotAuthorizedError: Unless the requester owns the project or is an admin
        """
        with logfire.span(
            "analytics_service.get_project_analytics", project_id=str(project.id)
        ):
            if project.owner_id != requester.id and not requester.is_admin:
                raise NotAuthorizedError(
                    "project analytics", str(project.id), str(requester.id)
                )
            engagement = (await self.get_engagement([project.id]))[project.id]
            since = date.today() - timedelta(days=self.settings.dashboard_days - 1)
            daily = await self.analytics_repository.find_daily([project.id], since)
            return ProjectAnalytics(
                project=project,
                engagement=engagement,
                daily=sorted(daily, key=lambda d: d.day),
            )

    async def get_projects_analytics(
        self, owner_id: UserId, limit: int, skip: int
    ) -> tuple[list[tuple[Project, ProjectEngagement]], int]:
        """Counters for the owner's projects, newest project first."""
        projects = await self.project_repository.find_by_owner(owner_id)
        page = projects[skip : skip + limit]
        engagement = await self.get_engagement([p.id for p in page])
        return [(p, engagement[p.id]) for p in page], len(projects)

    async def get_top_projects(
        self, owner_id: UserId, limit: int | None = None
    ) -> list[tuple[Project, ProjectEngagement]]:
        """The owner's projects ranked by popularity score."""
        limit = limit or self.settings.top_projects_limit
        projects = await self.project_repository.find_by_owner(owner_id)
        engagement = await self.get_engagement([p.id for p in projects])
        ranked = rank_by_popularity([(p, engagement[p.id]) for p in projects])
        return ranked[:limit]

    async def get_dashboard(self, owner_id: UserId) -> Dashboard:
        """Build the owner dashboard.

        Includes totals across all owned projects, the top projects, recent
        activity, and one views bucket per day for the configured window
        (oldest first, zero-filled).
        """
        with logfire.span("analytics_service.get_dashboard", user_id=str(owner_id)):
            projects = await self.project_repository.find_by_owner(owner_id)
            project_ids = [p.id for p in projects]
            engagement = await self.get_engagement(project_ids)

            totals = EngagementStats()
            for item in engagement.values():
                totals = totals + item.stats

            unique_viewers = (
                await self.analytics_repository.count_unique_viewers(project_ids)
                if project_ids
                else 0
            )

            top = rank_by_popularity([(p, engagement[p.id]) for p in projects])[
                : self.settings.top_projects_limit
            ]

            recent, _ = await self.get_activity(
                owner_id, limit=self.settings.recent_activity_limit, skip=0
            )

            today = date.today()
            start = today - timedelta(days=self.settings.dashboard_days - 1)
            daily = (
                await self.analytics_repository.find_daily(project_ids, start)
                if project_ids
                else []
            )
            views_by_day: dict[date, int] = {}
            for bucket in daily:
                views_by_day[bucket.day] = (
                    views_by_day.get(bucket.day, 0) + bucket.stats.views
                )
            daily_views = [
                (start + timedelta(days=i), views_by_day.get(start + timedelta(days=i), 0))
                for i in range(self.settings.dashboard_days)
            ]

            logfire.info(
                "Dashboard built",
                user_id=str(owner_id),
                projects=len(projects),
                score=totals.popularity_score,
            )
            return Dashboard(
                total_projects=len(projects),
                totals=totals,
                unique_viewers=unique_viewers,
                top_projects=top,
                recent_activity=recent,
                daily_views=daily_views,
            )

    async def get_audience(self, owner_id: UserId) -> Audience:
        """Audience summary across the owner's projects.

        ``avg_engagement_rate`` is (likes + comments) / views as a percentage
        rounded to two decimals, 0 when there are no views.
        """
        projects = await self.project_repository.find_by_owner(owner_id)
        project_ids = [p.id for p in projects]
        engagement = await self.get_engagement(project_ids)

        totals = EngagementStats()
        for item in engagement.values():
            totals = totals + item.stats

        rate = 0.0
        if totals.views > 0:
            rate = round((totals.likes + totals.comments) / totals.views * 100, 2)

        return Audience(
            total_unique_viewers=(
                await self.analytics_repository.count_unique_viewers(project_ids)
                if project_ids
                else 0
            ),
            total_views=totals.views,
            total_likes=totals.likes,
            total_comments=totals.comments,
            avg_engagement_rate=rate,
            project_engagement=[
                (pid, engagement[pid].stats.engagement) for pid in project_ids
            ],
        )
