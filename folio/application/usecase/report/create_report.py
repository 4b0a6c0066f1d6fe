"""Create report use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel
from folio.domain.model import Report
from folio.domain.service import ReportService, UserService
from folio.domain.value import (
    CommentId,
    ProjectId,
    ReportAction,
    ReportReason,
    ReportStatus,
    ReportType,
    UserId,
)


class ReportInfo(ApiModel):
    """A report as shown to reporters and admins."""

    id: str
    reporter_id: str
    type: ReportType
    target_user_id: str
    target_project_id: str | None
    target_comment_id: str | None
    reason: ReportReason
    description: str
    status: ReportStatus
    action: ReportAction
    reviewed_by: str | None
    admin_notes: str | None
    reviewed_at: datetime | None
    created_at: datetime


def report_info(report: Report) -> ReportInfo:
    return ReportInfo(
        id=str(report.id),
        reporter_id=str(report.reporter_id),
        type=report.type,
        target_user_id=str(report.target_user_id),
        target_project_id=(
            str(report.target_project_id) if report.target_project_id else None
        ),
        target_comment_id=(
            str(report.target_comment_id) if report.target_comment_id else None
        ),
        reason=report.reason,
        description=report.description,
        status=report.status,
        action=report.action,
        reviewed_by=str(report.reviewed_by) if report.reviewed_by else None,
        admin_notes=report.admin_notes,
        reviewed_at=report.reviewed_at,
        created_at=report.created_at,
    )


class CreateReportRequest(BaseModel):
    """Create report request. The ID matching ``type`` is required."""

    reporter_id: str
    type: ReportType
    reason: ReportReason
    description: str
    user_id: str | None = None
    project_id: str | None = None
    comment_id: str | None = None


class CreateReportUseCase(BaseUseCase):
    """Use case for reporting a user, project or comment."""

    def __init__(
        self, report_service: ReportService, user_service: UserService
    ) -> None:
        """Initialize create report use case.

        Args:
            report_service: Report domain service
            user_service: User domain service
        """
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: CreateReportRequest) -> ReportInfo:
        """Execute create report flow.

        Raises:
            ValidationError: If the target ID is missing or the reporter is
                reporting themselves
            NotFoundError: If the target does not exist
        """
        reporter = await self.user_service.get_by_id(UserId(UUID(request.reporter_id)))
        report = await self.report_service.create(
            reporter,
            type=request.type,
            reason=request.reason,
            description=request.description,
            user_id=UserId(UUID(request.user_id)) if request.user_id else None,
            project_id=ProjectId(UUID(request.project_id)) if request.project_id else None,
            comment_id=CommentId(UUID(request.comment_id)) if request.comment_id else None,
        )
        return report_info(report)
