"""Report domain service.

Users report users, projects and comments; admins review the queue.
Applying an outcome to a report is ModerationService's job.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from folio.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from folio.domain.model import Report, User
from folio.domain.repository import CommentRepository, ReportRepository
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

from .base import Service
from .project_service import ProjectService
from .user_service import UserService

CLOSED_STATUSES = (ReportStatus.RESOLVED, ReportStatus.REJECTED)

# Resolving needs an action, so it only happens through ModerationService
STATUS_TRANSITIONS = {
    ReportStatus.PENDING: {ReportStatus.REVIEWING, ReportStatus.REJECTED},
    ReportStatus.REVIEWING: {ReportStatus.PENDING, ReportStatus.REJECTED},
}


def ensure_open(report: Report) -> None:
    if report.status in CLOSED_STATUSES:
        raise BusinessRuleViolationError("This report has already been closed")


@dataclass
class ReportStats:
    """Queue size per status and per target type."""

    total: int
    by_status: dict[ReportStatus, int]
    by_type: dict[ReportType, int]


class ReportService(Service):
    """Domain service for filing and reviewing reports."""

    def __init__(
        self,
        report_repository: ReportRepository,
        comment_repository: CommentRepository,
        user_service: UserService,
        project_service: ProjectService,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            comment_repository: Comment lookups for comment reports
            user_service: User domain service
            project_service: Project lookups for project reports
        """
        self.report_repository = report_repository
        self.comment_repository = comment_repository
        self.user_service = user_service
        self.project_service = project_service

    async def create(
        self,
        reporter: User,
        type: ReportType,
        reason: ReportReason,
        description: str,
        user_id: UserId | None = None,
        project_id: ProjectId | None = None,
        comment_id: CommentId | None = None,
    ) -> Report:
        """File a report.

        The accountable user is resolved from the target: the reported user,
        the project owner, or the comment author.

        Raises:
            ValidationError: If the target ID is missing or the reporter is
                reporting themselves
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "report_service.create", reporter_id=str(reporter.id), type=type.value
        ):
            target_project_id = None
            target_comment_id = None

            if type == ReportType.USER:
                if not user_id:
                    raise ValidationError("A user ID is required for user reports")
                target_user_id = (await self.user_service.get_by_id(user_id)).id
            elif type == ReportType.PROJECT:
                if not project_id:
                    raise ValidationError("A project ID is required for project reports")
                project = await self.project_service.get_by_id(project_id)
                target_user_id = project.owner_id
                target_project_id = project.id
            else:
                if not comment_id:
                    raise ValidationError("A comment ID is required for comment reports")
                comment = await self.comment_repository.find_by_id(comment_id)
                if not comment:
                    raise NotFoundError("Comment", str(comment_id))
                target_user_id = comment.author_id
                target_project_id = comment.project_id
                target_comment_id = comment.id

            if target_user_id == reporter.id:
                raise ValidationError("You cannot report yourself")

            report = Report(
                id=ReportId(uuid4()),
                reporter_id=reporter.id,
                type=type,
                target_user_id=target_user_id,
                target_project_id=target_project_id,
                target_comment_id=target_comment_id,
                reason=reason,
                description=description.strip(),
            )
            saved = await self.report_repository.save(report)
            logfire.info(
                "Report filed",
                report_id=str(saved.id),
                type=type.value,
                reason=reason.value,
            )
            return saved

    async def get_by_id(self, report_id: ReportId) -> Report:
        """Get report by ID.

        Raises:
            NotFoundError: If report not found
        """
        report = await self.report_repository.find_by_id(report_id)
        if not report:
            raise NotFoundError("Report", str(report_id))
        return report

    async def list_reports(
        self,
        status: ReportStatus | None,
        report_type: ReportType | None,
        page: int,
        limit: int,
    ) -> tuple[list[Report], int]:
        offset = (max(page, 1) - 1) * limit
        reports = await self.report_repository.find_all(status, report_type, limit, offset)
        total = await self.report_repository.count(status, report_type)
        return reports, total

    async def stats(self) -> ReportStats:
        by_status = await self.report_repository.count_by_status()
        by_type = await self.report_repository.count_by_type()
        return ReportStats(
            total=sum(by_status.values()),
            by_status={status: by_status.get(status, 0) for status in ReportStatus},
            by_type={report_type: by_type.get(report_type, 0) for report_type in ReportType},
        )

    async def update_status(
        self,
        report_id: ReportId,
        admin: User,
        status: ReportStatus,
        admin_notes: str | None = None,
    ) -> Report:
        """Move a report to a new status and record the reviewer.

        Open reports may move between pending and reviewing, or be rejected.
        Keeping the current status only updates the notes.

        Raises:
            NotFoundError: If report not found
            BusinessRuleViolationError: If the report is closed or the move
                is not allowed
        """
        with logfire.span(
            "report_service.update_status", report_id=str(report_id), status=status.value
        ):
            report = await self.get_by_id(report_id)
            ensure_open(report)
            allowed = STATUS_TRANSITIONS[report.status]
            if status != report.status and status not in allowed:
                raise BusinessRuleViolationError(
                    f"A {report.status.value} report cannot be moved to {status.value}"
                )
            update: dict = {
                "status": status,
                "reviewed_by": admin.id,
                "reviewed_at": datetime.now(),
                "updated_at": datetime.now(),
            }
            if admin_notes is not None:
                update["admin_notes"] = admin_notes
            saved = await self.report_repository.save(report.model_copy(update=update))
            logfire.info(
                "Report status updated",
                report_id=str(report_id),
                status=status.value,
                admin_id=str(admin.id),
            )
            return saved

    async def reject(
        self, report_id: ReportId, admin: User, admin_notes: str | None = None
    ) -> Report:
        return await self.update_status(
            report_id, admin, ReportStatus.REJECTED, admin_notes
        )

    async def resolve(
        self,
        report: Report,
        admin: User,
        action: ReportAction,
        admin_notes: str | None = None,
    ) -> Report:
        """Close a report as resolved with the applied action."""
        ensure_open(report)
        update: dict = {
            "status": ReportStatus.RESOLVED,
            "action": action,
            "reviewed_by": admin.id,
            "reviewed_at": datetime.now(),
            "updated_at": datetime.now(),
        }
        if admin_notes is not None:
            update["admin_notes"] = admin_notes
        return await self.report_repository.save(report.model_copy(update=update))
