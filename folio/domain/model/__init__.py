"""Domain model entities for Folio."""

from folio.domain.model.analytics import ActivityEntry, DailyStats, ProjectEngagement
from folio.domain.model.comment import Comment
from folio.domain.model.notification import Notification
from folio.domain.model.project import Collaborator, Invitation, Project
from folio.domain.model.report import Report
from folio.domain.model.user import AccountWarning, User

__all__ = [
    "AccountWarning",
    "ActivityEntry",
    "Collaborator",
    "Comment",
    "DailyStats",
    "Invitation",
    "Notification",
    "Project",
    "ProjectEngagement",
    "Report",
    "User",
]
