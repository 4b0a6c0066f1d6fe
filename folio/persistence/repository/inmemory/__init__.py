"""In-memory repository implementations for testing."""

from .analytics import InMemoryActivityRepository, InMemoryAnalyticsRepository
from .collaboration import InMemoryCollaborationRepository
from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository
from .project import InMemoryProjectRepository
from .relationship import InMemoryRelationshipRepository
from .report import InMemoryReportRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryAnalyticsRepository",
    "InMemoryCollaborationRepository",
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
    "InMemoryProjectRepository",
    "InMemoryRelationshipRepository",
    "InMemoryReportRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
