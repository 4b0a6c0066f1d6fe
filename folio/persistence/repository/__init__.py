"""PostgreSQL repository implementations."""

from folio.persistence.repository.analytics import (
    PostgresActivityRepository,
    PostgresAnalyticsRepository,
)
from folio.persistence.repository.collaboration import PostgresCollaborationRepository
from folio.persistence.repository.comment import PostgresCommentRepository
from folio.persistence.repository.notification import PostgresNotificationRepository
from folio.persistence.repository.project import PostgresProjectRepository
from folio.persistence.repository.relationship import PostgresRelationshipRepository
from folio.persistence.repository.report import PostgresReportRepository
from folio.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresActivityRepository",
    "PostgresAnalyticsRepository",
    "PostgresCollaborationRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
    "PostgresProjectRepository",
    "PostgresRelationshipRepository",
    "PostgresReportRepository",
    "PostgresUserRepository",
]
