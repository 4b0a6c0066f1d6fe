"""Response models shared across use cases.

Responses are serialized with camelCase keys; request models built by the
interface layer accept both spellings.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from folio.domain.model import Project, User
from folio.domain.value import (
    Capabilities,
    EngagementStats,
    FollowAction,
    ProjectVisibility,
)


class ApiModel(BaseModel):
    """Base for models that cross the HTTP boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(ApiModel):
    """Generic acknowledgement."""

    success: bool = True
    message: str


class PagePagination(ApiModel):
    """Page-number pagination."""

    page: int
    limit: int
    total: int


class SkipPagination(ApiModel):
    """Offset pagination."""

    skip: int
    limit: int
    total: int


class UserSummary(ApiModel):
    """Public card for a user."""

    id: str
    username: str
    name: str
    avatar_url: str | None
    bio: str | None
    is_private: bool


class StatsInfo(ApiModel):
    """Engagement counters for one project."""

    views: int
    likes: int
    comments: int
    engagement: int
    popularity_score: int


class ProjectInfo(ApiModel):
    """Project as returned by list and detail endpoints."""

    id: str
    owner_id: str
    title: str
    slug: str
    description: str | None
    live_url: str | None
    repo_url: str | None
    tags: list[str]
    images: list[str]
    visibility: ProjectVisibility
    likes_count: int = 0
    owner: UserSummary | None = None
    created_at: datetime
    updated_at: datetime


class RelationshipInfo(ApiModel):
    """What the caller may do with another user."""

    is_own_profile: bool
    can_view: bool
    can_interact: bool
    is_following: bool
    is_follower: bool
    is_blocked: bool
    is_blocked_by: bool
    has_pending_request: bool
    follow_action: FollowAction


def user_summary(user: User) -> UserSummary:
    return UserSummary(
        id=str(user.id),
        username=user.username.root,
        name=user.name,
        avatar_url=user.avatar_url,
        bio=user.bio,
        is_private=user.privacy.is_private,
    )


def stats_info(stats: EngagementStats) -> StatsInfo:
    return StatsInfo(
        views=stats.views,
        likes=stats.likes,
        comments=stats.comments,
        engagement=stats.engagement,
        popularity_score=stats.popularity_score,
    )


def project_info(
    project: Project, likes_count: int = 0, owner: User | None = None
) -> ProjectInfo:
    return ProjectInfo(
        id=str(project.id),
        owner_id=str(project.owner_id),
        title=project.title,
        slug=project.slug.root,
        description=project.description,
        live_url=project.live_url,
        repo_url=project.repo_url,
        tags=[tag.root for tag in project.tags],
        images=project.images,
        visibility=project.visibility,
        likes_count=likes_count,
        owner=user_summary(owner) if owner else None,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def relationship_info(capabilities: Capabilities) -> RelationshipInfo:
    return RelationshipInfo(**capabilities.model_dump())
