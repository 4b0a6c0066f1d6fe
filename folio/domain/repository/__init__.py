"""Repository interfaces for the Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from folio.domain.repository.analytics import ActivityRepository, AnalyticsRepository
from folio.domain.repository.collaboration import CollaborationRepository
from folio.domain.repository.comment import CommentRepository
from folio.domain.repository.notification import NotificationRepository
from folio.domain.repository.project import ProjectRepository
from folio.domain.repository.relationship import RelationshipRepository
from folio.domain.repository.report import ReportRepository
from folio.domain.repository.user import UserRepository

__all__ = [
    "ActivityRepository",
    "AnalyticsRepository",
    "CollaborationRepository",
    "CommentRepository",
    "NotificationRepository",
    "ProjectRepository",
    "RelationshipRepository",
    "ReportRepository",
    "UserRepository",
]
