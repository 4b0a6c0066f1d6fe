"""Domain services."""

from .analytics_service import AnalyticsService, Audience, Dashboard, ProjectAnalytics
from .auth_service import AuthService
from .base import Service
from .collaboration_service import CollaborationService
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_policy import ensure_can_moderate
from .moderation_service import ModerationService
from .notification_service import NotificationService
from .project_service import ProjectService
from .ranking_service import (
    ProjectRanking,
    RankingPage,
    RankingPosition,
    RankingService,
    TagRanking,
    UserRanking,
)
from .relationship_service import RelationshipService
from .report_service import ReportService, ReportStats
from .user_service import UserService

__all__ = [
    "AnalyticsService",
    "Audience",
    "AuthService",
    "CollaborationService",
    "CommentService",
    "Dashboard",
    "JWTService",
    "ModerationService",
    "NotificationService",
    "ProjectAnalytics",
    "ProjectRanking",
    "ProjectService",
    "RankingPage",
    "RankingPosition",
    "RankingService",
    "RelationshipService",
    "ReportService",
    "ReportStats",
    "Service",
    "TagRanking",
    "UserRanking",
    "UserService",
    "ensure_can_moderate",
]
