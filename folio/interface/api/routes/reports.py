"""Content report routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import Field

from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.common import ApiModel
from folio.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    ReportInfo,
)
from folio.domain.value import ReportReason, ReportType
from folio.interface.api.auth import require_user

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class CreateReportAPIRequest(ApiModel):
    """API request for reporting a user, project or comment.

    Only the id matching ``type`` is used.
    """

    type: ReportType
    reason: ReportReason
    description: str = Field(min_length=1, max_length=1000)
    user_id: UUID | None = None
    project_id: UUID | None = None
    comment_id: UUID | None = None


@router.post("", response_model=ReportInfo, status_code=status.HTTP_201_CREATED)
async def create_report(
    request: CreateReportAPIRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReportInfo:
    """File a report.

    Args:
        request: Report target and reason
        create_report_use_case: Create report use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer token

    Returns:
        The pending report

    Raises:
        ValidationError: If the target id is missing or the target is the reporter
        NotFoundError: If the target does not exist
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await create_report_use_case.execute(
        CreateReportRequest(
            reporter_id=user.id,
            type=request.type,
            reason=request.reason,
            description=request.description,
            user_id=str(request.user_id) if request.user_id else None,
            project_id=str(request.project_id) if request.project_id else None,
            comment_id=str(request.comment_id) if request.comment_id else None,
        )
    )
