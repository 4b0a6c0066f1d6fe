"""Shared pieces of the admin use cases."""

from datetime import datetime
from uuid import UUID

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel
from folio.domain.error import PermissionDeniedError
from folio.domain.model import User
from folio.domain.service import UserService
from folio.domain.value import UserId


class AdminUserInfo(ApiModel):
    """A user with moderation state, for admin screens."""

    id: str
    username: str
    email: str
    name: str
    is_admin: bool
    is_suspended: bool
    suspended_reason: str | None
    suspended_at: datetime | None
    is_banned: bool
    banned_reason: str | None
    banned_at: datetime | None
    is_deleted: bool
    deleted_reason: str | None
    deleted_at: datetime | None
    created_at: datetime


def admin_user_info(user: User) -> AdminUserInfo:
    return AdminUserInfo(
        id=str(user.id),
        username=user.username.root,
        email=user.email,
        name=user.name,
        is_admin=user.is_admin,
        is_suspended=user.is_suspended,
        suspended_reason=user.suspended_reason,
        suspended_at=user.suspended_at,
        is_banned=user.is_banned,
        banned_reason=user.banned_reason,
        banned_at=user.banned_at,
        is_deleted=user.is_deleted,
        deleted_reason=user.deleted_reason,
        deleted_at=user.deleted_at,
        created_at=user.created_at,
    )


class AdminUseCase(BaseUseCase):
    """Base for use cases restricted to admins."""

    user_service: UserService

    async def load_admin(self, admin_id: str) -> User:
        """Load the acting user and require admin rights.

        Raises:
            PermissionDeniedError: If the user is not an admin
        """
        admin = await self.user_service.get_by_id(UserId(UUID(admin_id)))
        if not admin.is_admin:
            raise PermissionDeniedError("Admin privileges required")
        return admin
