"""Report review use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.usecase.admin.base import AdminUseCase
from folio.application.usecase.common import ApiModel, PagePagination
from folio.application.usecase.report import ReportInfo, report_info
from folio.domain.service import ModerationService, ReportService, UserService
from folio.domain.value import ReportAction, ReportId, ReportStatus, ReportType


class ListReportsRequest(BaseModel):
    """Report queue filter and page."""

    admin_id: str
    status: ReportStatus | None = None
    type: ReportType | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListReportsResponse(ApiModel):
    reports: list[ReportInfo]
    pagination: PagePagination


class ListReportsUseCase(AdminUseCase):
    """Use case for browsing the report queue, newest first."""

    def __init__(
        self, report_service: ReportService, user_service: UserService
    ) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        await self.load_admin(request.admin_id)
        reports, total = await self.report_service.list_reports(
            request.status, request.type, request.page, request.limit
        )
        return ListReportsResponse(
            reports=[report_info(r) for r in reports],
            pagination=PagePagination(
                page=request.page, limit=request.limit, total=total
            ),
        )


class AdminRequest(BaseModel):
    """Request naming the acting admin."""

    admin_id: str


class ReportStatsResponse(ApiModel):
    """Queue size per status and per target type."""

    total: int
    by_status: dict[str, int]
    by_type: dict[str, int]


class ReportStatsUseCase(AdminUseCase):
    """Use case for report queue statistics."""

    def __init__(
        self, report_service: ReportService, user_service: UserService
    ) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: AdminRequest) -> ReportStatsResponse:
        await self.load_admin(request.admin_id)
        stats = await self.report_service.stats()
        return ReportStatsResponse(
            total=stats.total,
            by_status={status.value: n for status, n in stats.by_status.items()},
            by_type={report_type.value: n for report_type, n in stats.by_type.items()},
        )


class ReportRequest(BaseModel):
    """The acting admin and one report."""

    admin_id: str
    report_id: str


class GetReportUseCase(AdminUseCase):
    """Use case for reading one report."""

    def __init__(
        self, report_service: ReportService, user_service: UserService
    ) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: ReportRequest) -> ReportInfo:
        await self.load_admin(request.admin_id)
        report = await self.report_service.get_by_id(ReportId(UUID(request.report_id)))
        return report_info(report)


class UpdateReportStatusRequest(BaseModel):
    """Move a report to a new status."""

    admin_id: str
    report_id: str
    status: ReportStatus
    admin_notes: str | None = None


class UpdateReportStatusUseCase(AdminUseCase):
    """Use case for changing a report's review status."""

    def __init__(
        self, report_service: ReportService, user_service: UserService
    ) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: UpdateReportStatusRequest) -> ReportInfo:
        admin = await self.load_admin(request.admin_id)
        report = await self.report_service.update_status(
            ReportId(UUID(request.report_id)),
            admin,
            request.status,
            request.admin_notes,
        )
        return report_info(report)


class RejectReportRequest(BaseModel):
    """Dismiss a report."""

    admin_id: str
    report_id: str
    admin_notes: str | None = None


class RejectReportUseCase(AdminUseCase):
    """Use case for dismissing a report without action."""

    def __init__(
        self, report_service: ReportService, user_service: UserService
    ) -> None:
        self.report_service = report_service
        self.user_service = user_service

    async def execute(self, request: RejectReportRequest) -> ReportInfo:
        admin = await self.load_admin(request.admin_id)
        report = await self.report_service.reject(
            ReportId(UUID(request.report_id)), admin, request.admin_notes
        )
        return report_info(report)


class ProcessReportRequest(BaseModel):
    """Resolve a report by applying an action to its target."""

    admin_id: str
    report_id: str
    action: ReportAction
    admin_notes: str | None = None
    reason: str | None = None


class ProcessReportUseCase(AdminUseCase):
    """Use case for resolving a report."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        """Initialize process report use case.

        Args:
            moderation_service: Applies the action and closes the report
            user_service: User domain service
        """
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: ProcessReportRequest) -> ReportInfo:
        """Apply the action and mark the report resolved.

        Raises:
            NotFoundError: If the report or its target no longer exists
            BusinessRuleViolationError: If the report is already closed
            PermissionDeniedError: If the moderation policy forbids the action
        """
        admin = await self.load_admin(request.admin_id)
        report = await self.moderation_service.process_report(
            ReportId(UUID(request.report_id)),
            admin,
            request.action,
            admin_notes=request.admin_notes,
            reason=request.reason,
        )
        return report_info(report)
