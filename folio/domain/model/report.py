"""Moderation report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import (
    CommentId,
    ProjectId,
    ReportAction,
    ReportId,
    ReportReason,
    ReportStatus,
    ReportType,
    UserId,
)


class Report(DomainModel):
    """User-submitted report about a user, project or comment.

    ``target_user_id`` always names the accountable user: the reported user,
    the project owner, or the comment author.
    """

    id: ReportId
    reporter_id: UserId
    type: ReportType
    target_user_id: UserId
    target_project_id: Optional[ProjectId] = None
    target_comment_id: Optional[CommentId] = None
    reason: ReportReason
    description: str = Field(min_length=10, max_length=1000)
    status: ReportStatus = ReportStatus.PENDING
    action: ReportAction = ReportAction.NONE
    reviewed_by: Optional[UserId] = None
    admin_notes: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
