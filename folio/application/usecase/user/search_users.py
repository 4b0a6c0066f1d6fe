"""Search users use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import (
    ApiModel,
    PagePagination,
    UserSummary,
    user_summary,
)
from folio.domain.service import UserService


class SearchUsersRequest(BaseModel):
    """Search users request."""

    query: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=50)


class SearchUsersResponse(ApiModel):
    """Search users response."""

    users: list[UserSummary]
    pagination: PagePagination


class SearchUsersUseCase(BaseUseCase):
    """Use case for finding users by username or name."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        users, total = await self.user_service.search(
            request.query, request.page, request.limit
        )
        return SearchUsersResponse(
            users=[user_summary(user) for user in users],
            pagination=PagePagination(
                page=request.page, limit=request.limit, total=total
            ),
        )
