"""Shared state behind the in-memory repositories.

Every in-memory repository reads and writes the same store, so a test
container can hand out fresh repositories per request while keeping the
data of the whole test (users registered in one request are visible to
the next).
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from folio.domain.model import (
    AccountWarning,
    ActivityEntry,
    Collaborator,
    Comment,
    Invitation,
    Notification,
    Project,
    Report,
    User,
)
from folio.domain.value import (
    CommentId,
    EngagementStats,
    NotificationId,
    ProjectId,
    ReportId,
    UserId,
)


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    Edge sets are dicts keyed by the pair, valued by the creation time;
    dict insertion order doubles as creation order.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    warnings: list[AccountWarning] = field(default_factory=list)

    follows: dict[tuple[UserId, UserId], datetime] = field(default_factory=dict)
    follow_requests: dict[tuple[UserId, UserId], datetime] = field(
        default_factory=dict
    )
    blocks: dict[tuple[UserId, UserId], datetime] = field(default_factory=dict)

    projects: dict[ProjectId, Project] = field(default_factory=dict)
    project_likes: dict[tuple[ProjectId, UserId], datetime] = field(
        default_factory=dict
    )
    saved_projects: dict[tuple[UserId, ProjectId], datetime] = field(
        default_factory=dict
    )

    comments: dict[CommentId, Comment] = field(default_factory=dict)
    comment_likes: dict[tuple[CommentId, UserId], datetime] = field(
        default_factory=dict
    )

    collaborators: dict[tuple[ProjectId, UserId], Collaborator] = field(
        default_factory=dict
    )
    invitations: dict[tuple[ProjectId, UserId], Invitation] = field(
        default_factory=dict
    )

    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
    reports: dict[ReportId, Report] = field(default_factory=dict)

    project_stats: dict[ProjectId, EngagementStats] = field(default_factory=dict)
    stats_updated: dict[ProjectId, datetime] = field(default_factory=dict)
    daily_stats: dict[tuple[ProjectId, date], EngagementStats] = field(
        default_factory=dict
    )
    project_viewers: dict[ProjectId, set[UserId]] = field(default_factory=dict)
    activity: list[ActivityEntry] = field(default_factory=list)

    def delete_project(self, project_id: ProjectId) -> bool:
        """Remove a project and every row that references it."""
        if self.projects.pop(project_id, None) is None:
            return False
        comment_ids = {
            cid for cid, c in self.comments.items() if c.project_id == project_id
        }
        self.comments = {
            cid: c for cid, c in self.comments.items() if cid not in comment_ids
        }
        self.comment_likes = {
            key: at for key, at in self.comment_likes.items() if key[0] not in comment_ids
        }
        self.project_likes = {
            key: at for key, at in self.project_likes.items() if key[0] != project_id
        }
        self.saved_projects = {
            key: at for key, at in self.saved_projects.items() if key[1] != project_id
        }
        self.collaborators = {
            key: c for key, c in self.collaborators.items() if key[0] != project_id
        }
        self.invitations = {
            key: i for key, i in self.invitations.items() if key[0] != project_id
        }
        self.notifications = {
            nid: n
            for nid, n in self.notifications.items()
            if n.project_id != project_id
        }
        self.project_stats.pop(project_id, None)
        self.stats_updated.pop(project_id, None)
        self.daily_stats = {
            key: s for key, s in self.daily_stats.items() if key[0] != project_id
        }
        self.project_viewers.pop(project_id, None)
        return True
