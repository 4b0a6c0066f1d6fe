"""Moderation domain service.

Applies report outcomes and direct admin actions to accounts and content.
Every account change, and every removal of someone else's content, goes
through ``ensure_can_moderate``.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from folio.domain.error import NotFoundError, ValidationError
from folio.domain.model import AccountWarning, Project, Report, User
from folio.domain.repository import CommentRepository, UserRepository
from folio.domain.value import (
    ModeratedFilter,
    ModerationAction,
    NotificationType,
    ProjectId,
    ReportAction,
    ReportId,
    ReportType,
    UserId,
    WarningId,
)

from .base import Service
from .comment_service import CommentService
from .moderation_policy import ensure_can_moderate
from .notification_service import NotificationService
from .project_service import ProjectService
from .report_service import ReportService, ensure_open
from .user_service import UserService


def _require_reason(reason: str | None) -> str:
    if not reason or not reason.strip():
        raise ValidationError("A reason is required")
    return reason.strip()


class ModerationService(Service):
    """Domain service for admin actions on users, projects and comments."""

    def __init__(
        self,
        user_repository: UserRepository,
        comment_repository: CommentRepository,
        user_service: UserService,
        report_service: ReportService,
        project_service: ProjectService,
        comment_service: CommentService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize moderation service.

        Args:
            user_repository: User repository
            comment_repository: Comment lookups for content removal
            user_service: User domain service
            report_service: Report lookups and status changes
            project_service: Project removal
            comment_service: Comment removal
            notification_service: Warning notifications
        """
        self.user_repository = user_repository
        self.comment_repository = comment_repository
        self.user_service = user_service
        self.report_service = report_service
        self.project_service = project_service
        self.comment_service = comment_service
        self.notification_service = notification_service

    # Account actions

    async def warn(
        self,
        admin: User,
        target: User,
        reason: str,
        report_id: ReportId | None = None,
    ) -> AccountWarning:
        """Record a warning and notify the user."""
        ensure_can_moderate(admin, target, ModerationAction.WARN)
        warning = await self.user_repository.add_warning(
            AccountWarning(
                id=WarningId(uuid4()),
                user_id=target.id,
                reason=reason,
                issued_by=admin.id,
                report_id=report_id,
            )
        )
        await self.notification_service.notify(
            target.id,
            admin.id,
            NotificationType.WARNING,
            f"You received a warning: {reason}",
        )
        logfire.warn("User warned", user_id=str(target.id), admin_id=str(admin.id))
        return warning

    async def suspend(self, admin: User, target_id: UserId, reason: str | None) -> User:
        """Suspend an account.

        Raises:
            ValidationError: If no reason is given
            NotFoundError: If the user does not exist
            PermissionDeniedError: If the moderation policy forbids it
        """
        reason = _require_reason(reason)
        target = await self.user_service.get_by_id(target_id)
        return await self._suspend(admin, target, reason)

    async def _suspend(self, admin: User, target: User, reason: str) -> User:
        ensure_can_moderate(admin, target, ModerationAction.SUSPEND)
        saved = await self.user_repository.save(
            target.model_copy(
                update={
                    "is_suspended": True,
                    "suspended_reason": reason,
                    "suspended_at": datetime.now(),
                    "updated_at": datetime.now(),
                }
            )
        )
        logfire.warn("User suspended", user_id=str(target.id), admin_id=str(admin.id))
        return saved

    async def ban(self, admin: User, target_id: UserId, reason: str | None) -> User:
        """Ban an account; a ban replaces any suspension.

        Raises:
            ValidationError: If no reason is given
            NotFoundError: If the user does not exist
            PermissionDeniedError: If the moderation policy forbids it
        """
        reason = _require_reason(reason)
        target = await self.user_service.get_by_id(target_id)
        return await self._ban(admin, target, reason)

    async def _ban(self, admin: User, target: User, reason: str) -> User:
        ensure_can_moderate(admin, target, ModerationAction.BAN)
        saved = await self.user_repository.save(
            target.model_copy(
                update={
                    "is_banned": True,
                    "banned_reason": reason,
                    "banned_at": datetime.now(),
                    "is_suspended": False,
                    "suspended_reason": None,
                    "suspended_at": None,
                    "updated_at": datetime.now(),
                }
            )
        )
        logfire.warn("User banned", user_id=str(target.id), admin_id=str(admin.id))
        return saved

    async def delete_user(
        self, admin: User, target_id: UserId, reason: str | None
    ) -> User:
        """Soft-delete an account. The row is kept, flagged as deleted.

        Raises:
            ValidationError: If no reason is given
            NotFoundError: If the user does not exist
            PermissionDeniedError: If the moderation policy forbids it
        """
        reason = _require_reason(reason)
        target = await self.user_service.get_by_id(target_id)
        return await self._delete_user(admin, target, reason)

    async def _delete_user(self, admin: User, target: User, reason: str) -> User:
        ensure_can_moderate(admin, target, ModerationAction.DELETE)
        saved = await self.user_repository.save(
            target.model_copy(
                update={
                    "is_deleted": True,
                    "deleted_reason": reason,
                    "deleted_at": datetime.now(),
                    "is_suspended": False,
                    "suspended_reason": None,
                    "suspended_at": None,
                    "is_banned": False,
                    "banned_reason": None,
                    "banned_at": None,
                    "updated_at": datetime.now(),
                }
            )
        )
        logfire.warn("User deleted", user_id=str(target.id), admin_id=str(admin.id))
        return saved

    async def reactivate(self, admin: User, target_id: UserId) -> User:
        """Clear suspension, ban and deletion flags."""
        target = await self.user_service.get_by_id(target_id)
        ensure_can_moderate(admin, target, ModerationAction.REACTIVATE)
        saved = await self.user_repository.save(
            target.model_copy(
                update={
                    "is_suspended": False,
                    "suspended_reason": None,
                    "suspended_at": None,
                    "is_banned": False,
                    "banned_reason": None,
                    "banned_at": None,
                    "is_deleted": False,
                    "deleted_reason": None,
                    "deleted_at": None,
                    "updated_at": datetime.now(),
                }
            )
        )
        logfire.info("User reactivated", user_id=str(target.id), admin_id=str(admin.id))
        return saved

    async def set_admin(self, admin: User, target_id: UserId, is_admin: bool) -> User:
        """Grant or revoke admin rights."""
        target = await self.user_service.get_by_id(target_id)
        action = ModerationAction.GRANT_ADMIN if is_admin else ModerationAction.REVOKE_ADMIN
        ensure_can_moderate(admin, target, action)
        saved = await self.user_repository.save(
            target.model_copy(update={"is_admin": is_admin, "updated_at": datetime.now()})
        )
        logfire.warn(
            "Admin role changed",
            user_id=str(target.id),
            admin_id=str(admin.id),
            is_admin=is_admin,
        )
        return saved

    # Reports

    async def process_report(
        self,
        report_id: ReportId,
        admin: User,
        action: ReportAction,
        admin_notes: str | None = None,
        reason: str | None = None,
    ) -> Report:
        """Resolve a report by applying ``action`` to its target.

        ``warning`` records a warning, ``content_removed`` deletes the reported
        project or comment (or soft-deletes a reported user), and the account
        actions suspend or ban the accountable user.

        Raises:
            NotFoundError: If the report or its target no longer exists
            BusinessRuleViolationError: If the report is already closed
            PermissionDeniedError: If the moderation policy forbids the action
        """
        with logfire.span(
            "moderation_service.process_report",
            report_id=str(report_id),
            action=action.value,
        ):
            report = await self.report_service.get_by_id(report_id)
            ensure_open(report)

            target = await self.user_service.get_by_id(report.target_user_id)
            reason = (reason or admin_notes or report.reason.value).strip()

            if action == ReportAction.WARNING:
                await self.warn(admin, target, reason, report_id=report.id)
            elif action == ReportAction.ACCOUNT_SUSPENDED:
                await self._suspend(admin, target, reason)
            elif action == ReportAction.ACCOUNT_BANNED:
                await self._ban(admin, target, reason)
            elif action == ReportAction.CONTENT_REMOVED:
                await self._remove_content(admin, report, target, reason)

            saved = await self.report_service.resolve(
                report, admin, action, admin_notes
            )
            logfire.info(
                "Report resolved",
                report_id=str(report.id),
                action=action.value,
                admin_id=str(admin.id),
            )
            return saved

    async def _remove_content(
        self, admin: User, report: Report, target: User, reason: str
    ) -> None:
        if report.type == ReportType.USER:
            await self._delete_user(admin, target, reason)
            return

        if report.type == ReportType.PROJECT:
            project = await self.project_service.get_by_id(report.target_project_id)
            ensure_can_moderate(admin, target, ModerationAction.DELETE)
            await self.project_service.remove(project)
            return

        comment = await self.comment_repository.find_by_id(report.target_comment_id)
        if not comment:
            raise NotFoundError("Comment", str(report.target_comment_id))
        project = await self.project_service.get_by_id(comment.project_id)
        ensure_can_moderate(admin, target, ModerationAction.DELETE)
        await self.comment_service.remove(comment, project)

    # Listings

    async def list_users(self, page: int, limit: int) -> tuple[list[User], int]:
        offset = (max(page, 1) - 1) * limit
        users = await self.user_repository.find_all(limit, offset)
        return users, await self.user_repository.count()

    async def list_moderated(self, state: ModeratedFilter) -> list[User]:
        return await self.user_repository.find_moderated(state)

    async def list_user_projects(self, user_id: UserId) -> list[Project]:
        user = await self.user_service.get_by_id(user_id)
        return await self.project_service.list_owned(user.id)

    async def delete_project(self, admin: User, project_id: ProjectId) -> Project:
        """Delete a project as an admin.

        Another admin's project is off limits until their role is revoked.

        Raises:
            NotFoundError: If the project does not exist
            PermissionDeniedError: If the moderation policy forbids it
        """
        project = await self.project_service.get_by_id(project_id)
        if project.owner_id != admin.id:
            owner = await self.user_service.get_by_id(project.owner_id)
            ensure_can_moderate(admin, owner, ModerationAction.DELETE)
        await self.project_service.remove(project)
        logfire.warn(
            "Project removed by admin",
            project_id=str(project.id),
            admin_id=str(admin.id),
        )
        return project
