"""Project routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import Field

from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.common import ApiModel, ProjectInfo, SuccessResponse
from folio.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectUseCase,
    FollowingFeedUseCase,
    GetProjectRequest,
    GetProjectResponse,
    GetProjectUseCase,
    LikeProjectUseCase,
    LikeResponse,
    ListMyProjectsUseCase,
    ListProjectsRequest,
    PopularTagsRequest,
    PopularTagsResponse,
    PopularTagsUseCase,
    ProjectActionRequest,
    ProjectListResponse,
    SavedProjectsUseCase,
    SaveProjectUseCase,
    SaveResponse,
    SearchProjectsRequest,
    SearchProjectsResponse,
    SearchProjectsUseCase,
    UnlikeProjectUseCase,
    UnsaveProjectUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from folio.domain.value import ProjectVisibility
from folio.interface.api.auth import optional_user, require_user

router = APIRouter(prefix="/projects", tags=["projects"], route_class=DishkaRoute)


class CreateProjectAPIRequest(ApiModel):
    """API request for creating a project."""

    title: str = Field(min_length=1, max_length=200)
    slug: str | None = None
    description: str | None = Field(default=None, max_length=5000)
    live_url: str | None = None
    repo_url: str | None = None
    tags: list[str] = Field(default_factory=list, max_length=10)
    images: list[str] = Field(default_factory=list)
    visibility: ProjectVisibility = ProjectVisibility.PUBLIC


class UpdateProjectAPIRequest(ApiModel):
    """API request for editing a project. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    slug: str | None = None
    description: str | None = Field(default=None, max_length=5000)
    live_url: str | None = None
    repo_url: str | None = None
    tags: list[str] | None = Field(default=None, max_length=10)
    images: list[str] | None = None
    visibility: ProjectVisibility | None = None


@router.get("", response_model=ProjectListResponse)
async def list_my_projects(
    list_my_projects_use_case: FromDishka[ListMyProjectsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ProjectListResponse:
    """List the signed-in user's own projects, newest first."""
    user = await require_user(authorization, get_current_user_use_case)
    return await list_my_projects_use_case.execute(ListProjectsRequest(user_id=user.id))


@router.get("/feed/following", response_model=ProjectListResponse)
async def following_feed(
    following_feed_use_case: FromDishka[FollowingFeedUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ProjectListResponse:
    """Newest projects from users the signed-in user follows."""
    user = await require_user(authorization, get_current_user_use_case)
    return await following_feed_use_case.execute(ListProjectsRequest(user_id=user.id))


@router.get("/saved", response_model=ProjectListResponse)
async def saved_projects(
    saved_projects_use_case: FromDishka[SavedProjectsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ProjectListResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await saved_projects_use_case.execute(ListProjectsRequest(user_id=user.id))


@router.get("/search", response_model=SearchProjectsResponse)
async def search_projects(
    search_projects_use_case: FromDishka[SearchProjectsUseCase],
    q: str | None = Query(default=None),
    tag: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=50),
) -> SearchProjectsResponse:
    """Search public projects by text and/or tag.

    Args:
        search_projects_use_case: Search use case from DI
        q: Text matched against title and description
        tag: Exact tag filter
        page: 1-based page number
        limit: Page size

    Returns:
        Matching projects and pagination
    """
    return await search_projects_use_case.execute(
        SearchProjectsRequest(query=q, tag=tag, page=page, limit=limit)
    )


@router.get("/tags/popular", response_model=PopularTagsResponse)
async def popular_tags(
    popular_tags_use_case: FromDishka[PopularTagsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
) -> PopularTagsResponse:
    """Most used tags across public projects."""
    return await popular_tags_use_case.execute(PopularTagsRequest(limit=limit))


@router.post("", response_model=ProjectInfo, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectAPIRequest,
    create_project_use_case: FromDishka[CreateProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ProjectInfo:
    """Create a project owned by the signed-in user.

    Args:
        request: Project data
        create_project_use_case: Create project use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer token

    Returns:
        The created project

    Raises:
        AuthenticationError: If not signed in
        BusinessRuleViolationError: If the slug is taken
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await create_project_use_case.execute(
        CreateProjectRequest(owner_id=user.id, **request.model_dump())
    )


@router.get("/{project_id}", response_model=GetProjectResponse)
async def get_project(
    project_id: UUID,
    get_project_use_case: FromDishka[GetProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetProjectResponse:
    """Get a project with its comments.

    A view is recorded when the viewer is not the owner.

    Raises:
        NotFoundError: If the project does not exist
        NotAuthorizedError: If the viewer may not see it
    """
    viewer = await optional_user(authorization, get_current_user_use_case)
    return await get_project_use_case.execute(
        GetProjectRequest(
            project_id=str(project_id), viewer_id=viewer.id if viewer else None
        )
    )


@router.put("/{project_id}", response_model=ProjectInfo)
async def update_project(
    project_id: UUID,
    request: UpdateProjectAPIRequest,
    update_project_use_case: FromDishka[UpdateProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ProjectInfo:
    """Edit a project. Owners and editors may edit; only owners change visibility."""
    user = await require_user(authorization, get_current_user_use_case)
    return await update_project_use_case.execute(
        UpdateProjectRequest(
            project_id=str(project_id),
            user_id=user.id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{project_id}", response_model=SuccessResponse)
async def delete_project(
    project_id: UUID,
    delete_project_use_case: FromDishka[DeleteProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Delete a project. Owner only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await delete_project_use_case.execute(
        DeleteProjectRequest(project_id=str(project_id), user_id=user.id)
    )


@router.post("/{project_id}/like", response_model=LikeResponse)
async def like_project(
    project_id: UUID,
    like_project_use_case: FromDishka[LikeProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    """Like a project. Liking twice is rejected."""
    user = await require_user(authorization, get_current_user_use_case)
    return await like_project_use_case.execute(
        ProjectActionRequest(project_id=str(project_id), user_id=user.id)
    )


@router.delete("/{project_id}/like", response_model=LikeResponse)
async def unlike_project(
    project_id: UUID,
    unlike_project_use_case: FromDishka[UnlikeProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> LikeResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await unlike_project_use_case.execute(
        ProjectActionRequest(project_id=str(project_id), user_id=user.id)
    )


@router.post("/{project_id}/save", response_model=SaveResponse)
async def save_project(
    project_id: UUID,
    save_project_use_case: FromDishka[SaveProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SaveResponse:
    """Bookmark a project."""
    user = await require_user(authorization, get_current_user_use_case)
    return await save_project_use_case.execute(
        ProjectActionRequest(project_id=str(project_id), user_id=user.id)
    )


@router.delete("/{project_id}/save", response_model=SaveResponse)
async def unsave_project(
    project_id: UUID,
    unsave_project_use_case: FromDishka[UnsaveProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SaveResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await unsave_project_use_case.execute(
        ProjectActionRequest(project_id=str(project_id), user_id=user.id)
    )
