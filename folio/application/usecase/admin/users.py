"""User moderation use cases."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.usecase.admin.base import (
    AdminUseCase,
    AdminUserInfo,
    admin_user_info,
)
from folio.application.usecase.common import (
    ApiModel,
    PagePagination,
    ProjectInfo,
    SuccessResponse,
    project_info,
)
from folio.domain.service import ModerationService, UserService
from folio.domain.value import ModeratedFilter, ProjectId, UserId


class AccountAction(str, Enum):
    """Direct account actions available to admins."""

    SUSPEND = "suspend"
    BAN = "ban"
    DELETE = "delete"
    REACTIVATE = "reactivate"


class ListUsersRequest(BaseModel):
    admin_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListUsersResponse(ApiModel):
    users: list[AdminUserInfo]
    pagination: PagePagination


class ListUsersUseCase(AdminUseCase):
    """Use case for listing every account, newest first."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        await self.load_admin(request.admin_id)
        users, total = await self.moderation_service.list_users(
            request.page, request.limit
        )
        return ListUsersResponse(
            users=[admin_user_info(u) for u in users],
            pagination=PagePagination(
                page=request.page, limit=request.limit, total=total
            ),
        )


class ListModeratedRequest(BaseModel):
    admin_id: str
    state: ModeratedFilter = ModeratedFilter.ALL


class ModeratedUsersResponse(ApiModel):
    users: list[AdminUserInfo]


class ListModeratedUsersUseCase(AdminUseCase):
    """Use case for listing suspended, banned or deleted accounts."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: ListModeratedRequest) -> ModeratedUsersResponse:
        await self.load_admin(request.admin_id)
        users = await self.moderation_service.list_moderated(request.state)
        return ModeratedUsersResponse(users=[admin_user_info(u) for u in users])


class ModerateUserRequest(BaseModel):
    """Apply a direct account action; all but reactivate need a reason."""

    admin_id: str
    user_id: str
    action: AccountAction
    reason: str | None = None


class ModerateUserUseCase(AdminUseCase):
    """Use case for suspending, banning, deleting or reactivating an account."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        """Initialize moderate user use case.

        Args:
            moderation_service: Moderation domain service
            user_service: User domain service
        """
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: ModerateUserRequest) -> AdminUserInfo:
        """Apply the action.

        Raises:
            ValidationError: If a required reason is missing
            NotFoundError: If the user does not exist
            PermissionDeniedError: If the moderation policy forbids it
        """
        admin = await self.load_admin(request.admin_id)
        target_id = UserId(UUID(request.user_id))
        service = self.moderation_service

        if request.action == AccountAction.SUSPEND:
            user = await service.suspend(admin, target_id, request.reason)
        elif request.action == AccountAction.BAN:
            user = await service.ban(admin, target_id, request.reason)
        elif request.action == AccountAction.DELETE:
            user = await service.delete_user(admin, target_id, request.reason)
        else:
            user = await service.reactivate(admin, target_id)
        return admin_user_info(user)


class SetAdminRequest(BaseModel):
    admin_id: str
    user_id: str
    is_admin: bool


class SetAdminUseCase(AdminUseCase):
    """Use case for granting or revoking admin rights."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: SetAdminRequest) -> AdminUserInfo:
        admin = await self.load_admin(request.admin_id)
        user = await self.moderation_service.set_admin(
            admin, UserId(UUID(request.user_id)), request.is_admin
        )
        return admin_user_info(user)


class UserProjectsRequest(BaseModel):
    admin_id: str
    user_id: str


class UserProjectsResponse(ApiModel):
    projects: list[ProjectInfo]


class ListUserProjectsUseCase(AdminUseCase):
    """Use case for listing any user's projects, private ones included."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: UserProjectsRequest) -> UserProjectsResponse:
        await self.load_admin(request.admin_id)
        projects = await self.moderation_service.list_user_projects(
            UserId(UUID(request.user_id))
        )
        return UserProjectsResponse(projects=[project_info(p) for p in projects])


class AdminDeleteProjectRequest(BaseModel):
    admin_id: str
    project_id: str


class AdminDeleteProjectUseCase(AdminUseCase):
    """Use case for removing any project."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: AdminDeleteProjectRequest) -> SuccessResponse:
        admin = await self.load_admin(request.admin_id)
        project = await self.moderation_service.delete_project(
            admin, ProjectId(UUID(request.project_id))
        )
        return SuccessResponse(message=f"Project \"{project.title}\" deleted")
