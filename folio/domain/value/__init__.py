"""Domain value objects for Folio."""

from folio.domain.value.identifiers import (
    ActivityId,
    CommentId,
    NotificationId,
    ProjectId,
    ReportId,
    UserId,
    WarningId,
)
from folio.domain.value.types import (
    AccountState,
    ActivityAction,
    Capabilities,
    CollaboratorRole,
    EngagementStats,
    FollowAction,
    FollowStatus,
    ModeratedFilter,
    ModerationAction,
    NotificationType,
    PrivacySettings,
    ProjectVisibility,
    ReportAction,
    ReportReason,
    ReportStatus,
    ReportType,
    Slug,
    TagName,
    Username,
)

__all__ = [
    # Identifiers
    "ActivityId",
    "CommentId",
    "NotificationId",
    "ProjectId",
    "ReportId",
    "UserId",
    "WarningId",
    # Types
    "AccountState",
    "ActivityAction",
    "Capabilities",
    "CollaboratorRole",
    "EngagementStats",
    "FollowAction",
    "FollowStatus",
    "ModeratedFilter",
    "ModerationAction",
    "NotificationType",
    "PrivacySettings",
    "ProjectVisibility",
    "ReportAction",
    "ReportReason",
    "ReportStatus",
    "ReportType",
    "Slug",
    "TagName",
    "Username",
]
