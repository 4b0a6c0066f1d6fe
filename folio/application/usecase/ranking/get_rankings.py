"""Ranking use cases."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import (
    ApiModel,
    SkipPagination,
    StatsInfo,
    UserSummary,
    stats_info,
    user_summary,
)
from folio.domain.service import (
    ProjectRanking,
    RankingPage,
    RankingService,
    TagRanking,
    UserRanking,
)
from folio.domain.value import EngagementStats


class RankingRequest(BaseModel):
    """Page of a ranking; the service clamps out-of-range values."""

    skip: int | None = None
    limit: int | None = None


class UserTotals(ApiModel):
    """All-time counters summed over a user's projects."""

    total_views: int
    total_likes: int
    total_comments: int
    total_engagement: int
    popularity_score: int


class WeeklyTotals(ApiModel):
    """Counters summed over the trailing week."""

    weekly_views: int
    weekly_likes: int
    weekly_comments: int
    weekly_score: int


class UserRankingEntry(ApiModel):
    """A ranked user."""

    rank: int
    user_id: str
    username: str
    name: str
    avatar_url: str | None
    bio: str | None
    followers_count: int
    project_count: int
    stats: UserTotals


class WeeklyRankingEntry(ApiModel):
    """A user ranked by this week's engagement."""

    rank: int
    user_id: str
    username: str
    name: str
    avatar_url: str | None
    bio: str | None
    followers_count: int
    project_count: int
    stats: WeeklyTotals


class ProjectRankingEntry(ApiModel):
    """A ranked project."""

    rank: int
    project_id: str
    title: str
    slug: str
    description: str | None
    images: list[str]
    owner: UserSummary
    tags: list[str]
    stats: StatsInfo


class TagRankingEntry(ApiModel):
    """A ranked tag."""

    rank: int
    tag: str
    project_count: int
    total_score: int
    total_views: int
    total_likes: int
    total_comments: int
    avg_score: int


class UserRankingResponse(ApiModel):
    users: list[UserRankingEntry]
    pagination: SkipPagination


class WeeklyRankingResponse(ApiModel):
    users: list[WeeklyRankingEntry]
    pagination: SkipPagination


class ProjectRankingResponse(ApiModel):
    projects: list[ProjectRankingEntry]
    pagination: SkipPagination


class TagRankingResponse(ApiModel):
    tags: list[TagRankingEntry]
    pagination: SkipPagination


def _pagination(page: RankingPage) -> SkipPagination:
    return SkipPagination(skip=page.skip, limit=page.limit, total=page.total)


def user_totals(stats: EngagementStats) -> UserTotals:
    return UserTotals(
        total_views=stats.views,
        total_likes=stats.likes,
        total_comments=stats.comments,
        total_engagement=stats.engagement,
        popularity_score=stats.popularity_score,
    )


class GlobalRankingUseCase(BaseUseCase):
    """Use case for the all-time user ranking."""

    def __init__(self, ranking_service: RankingService) -> None:
        self.ranking_service = ranking_service

    async def execute(self, request: RankingRequest) -> UserRankingResponse:
        page = await self.ranking_service.global_ranking(request.skip, request.limit)
        entries: list[UserRanking] = page.entries
        return UserRankingResponse(
            users=[
                UserRankingEntry(
                    rank=e.rank,
                    user_id=str(e.user.id),
                    username=e.user.username.root,
                    name=e.user.name,
                    avatar_url=e.user.avatar_url,
                    bio=e.user.bio,
                    followers_count=e.followers_count,
                    project_count=e.project_count,
                    stats=user_totals(e.stats),
                )
                for e in entries
            ],
            pagination=_pagination(page),
        )


class WeeklyRankingUseCase(BaseUseCase):
    """Use case for the trailing-week user ranking."""

    def __init__(self, ranking_service: RankingService) -> None:
        self.ranking_service = ranking_service

    async def execute(self, request: RankingRequest) -> WeeklyRankingResponse:
        page = await self.ranking_service.weekly_ranking(request.skip, request.limit)
        entries: list[UserRanking] = page.entries
        return WeeklyRankingResponse(
            users=[
                WeeklyRankingEntry(
                    rank=e.rank,
                    user_id=str(e.user.id),
                    username=e.user.username.root,
                    name=e.user.name,
                    avatar_url=e.user.avatar_url,
                    bio=e.user.bio,
                    followers_count=e.followers_count,
                    project_count=e.project_count,
                    stats=WeeklyTotals(
                        weekly_views=e.stats.views,
                        weekly_likes=e.stats.likes,
                        weekly_comments=e.stats.comments,
                        weekly_score=e.stats.popularity_score,
                    ),
                )
                for e in entries
            ],
            pagination=_pagination(page),
        )


class ProjectRankingUseCase(BaseUseCase):
    """Use case for the all-time project ranking."""

    def __init__(self, ranking_service: RankingService) -> None:
        self.ranking_service = ranking_service

    async def execute(self, request: RankingRequest) -> ProjectRankingResponse:
        page = await self.ranking_service.project_ranking(request.skip, request.limit)
        entries: list[ProjectRanking] = page.entries
        return ProjectRankingResponse(
            projects=[
                ProjectRankingEntry(
                    rank=e.rank,
                    project_id=str(e.project.id),
                    title=e.project.title,
                    slug=e.project.slug.root,
                    description=e.project.description,
                    images=e.project.images,
                    owner=user_summary(e.owner),
                    tags=[tag.root for tag in e.project.tags],
                    stats=stats_info(e.stats),
                )
                for e in entries
            ],
            pagination=_pagination(page),
        )


class TagRankingUseCase(BaseUseCase):
    """Use case for the tag ranking."""

    def __init__(self, ranking_service: RankingService) -> None:
        self.ranking_service = ranking_service

    async def execute(self, request: RankingRequest) -> TagRankingResponse:
        page = await self.ranking_service.tag_ranking(request.skip, request.limit)
        entries: list[TagRanking] = page.entries
        return TagRankingResponse(
            tags=[
                TagRankingEntry(
                    rank=e.rank,
                    tag=e.tag,
                    project_count=e.project_count,
                    total_score=e.total_score,
                    total_views=e.stats.views,
                    total_likes=e.stats.likes,
                    total_comments=e.stats.comments,
                    avg_score=e.avg_score,
                )
                for e in entries
            ],
            pagination=_pagination(page),
        )
