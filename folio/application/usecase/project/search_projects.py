"""Project discovery use cases."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, PagePagination, ProjectInfo
from folio.application.usecase.project.list_projects import build_project_list
from folio.domain.service import ProjectService, UserService


class SearchProjectsRequest(BaseModel):
    """Search projects request."""

    query: str | None = None
    tag: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=50)


class SearchProjectsResponse(ApiModel):
    """Search projects response."""

    projects: list[ProjectInfo]
    pagination: PagePagination


class SearchProjectsUseCase(BaseUseCase):
    """Use case for searching discoverable projects by text and tag."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: SearchProjectsRequest) -> SearchProjectsResponse:
        projects, total = await self.project_service.search(
            request.query, request.tag, request.page, request.limit
        )
        return SearchProjectsResponse(
            projects=await build_project_list(
                projects, self.project_service, self.user_service
            ),
            pagination=PagePagination(
                page=request.page, limit=request.limit, total=total
            ),
        )


class PopularTagsRequest(BaseModel):
    """Popular tags request."""

    limit: int = Field(default=20, ge=1, le=100)


class TagCount(ApiModel):
    """A tag and how many discoverable projects carry it."""

    tag: str
    count: int


class PopularTagsResponse(ApiModel):
    """Popular tags response."""

    tags: list[TagCount]


class PopularTagsUseCase(BaseUseCase):
    """Use case for listing the most used tags."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: PopularTagsRequest) -> PopularTagsResponse:
        tags = await self.project_service.popular_tags(request.limit)
        return PopularTagsResponse(
            tags=[TagCount(tag=tag, count=count) for tag, count in tags]
        )
