"""Unit tests for ModerationService and the report life cycle."""

import pytest

from folio.domain.error import (
    AccountStateError,
    BusinessRuleViolationError,
    PermissionDeniedError,
)
from folio.domain.repository import ProjectRepository, UserRepository
from folio.domain.service import (
    AuthService,
    CommentService,
    ModerationService,
    NotificationService,
    ProjectService,
    ReportService,
)
from folio.domain.value import (
    AccountState,
    NotificationType,
    ReportAction,
    ReportReason,
    ReportStatus,
    ReportType,
)
from tests.conftest import DEFAULT_PASSWORD, register_user, update_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def moderation_setup(unit_env):
    """An admin, a reporter and a reported user, created lazily per test."""

    async def _setup():
        auth_service = await unit_env.get(AuthService)
        user_repository = await unit_env.get(UserRepository)
        admin = await register_user(auth_service, "admin")
        admin = await update_user(user_repository, admin, is_admin=True)
        reporter = await register_user(auth_service, "reporter")
        target = await register_user(auth_service, "troll")
        return admin, reporter, target

    return _setup


async def report_user(env, reporter, target):
    report_service = await env.get(ReportService)
    return await report_service.create(
        reporter, ReportType.USER, ReportReason.HARASSMENT, "Rude replies", user_id=target.id
    )


class TestProcessReport:
    """Tests for applying each action to a report."""

    @pytest.mark.asyncio
    async def test_warning_records_warning_and_notifies(self, unit_env, moderation_setup):
        admin, reporter, target = await moderation_setup()
        moderation_service = await unit_env.get(ModerationService)
        notification_service = await unit_env.get(NotificationService)
        user_repository = await unit_env.get(UserRepository)
        report = await report_user(unit_env, reporter, target)

        # Act
        resolved = await moderation_service.process_report(
            report.id, admin, ReportAction.WARNING, admin_notes="First strike"
        )

        # Assert
        assert resolved.status == ReportStatus.RESOLVED
        assert resolved.action == ReportAction.WARNING
        warnings = await user_repository.find_warnings(target.id)
        assert [w.reason for w in warnings] == ["First strike"]
        assert warnings[0].report_id == report.id
        notifications, unread = await notification_service.list_for_user(
            target.id, unread_only=True, limit=50
        )
        assert unread == 1
        assert notifications[0].type == NotificationType.WARNING

    @pytest.mark.asyncio
    async def test_suspension_blocks_login(self, unit_env, moderation_setup):
        admin, reporter, target = await moderation_setup()
        moderation_service = await unit_env.get(ModerationService)
        auth_service = await unit_env.get(AuthService)
        report = await report_user(unit_env, reporter, target)

        await moderation_service.process_report(
            report.id, admin, ReportAction.ACCOUNT_SUSPENDED, reason="Cooling off"
        )

        with pytest.raises(AccountStateError) as exc_info:
            await auth_service.authenticate("troll", DEFAULT_PASSWORD)
        assert exc_info.value.state == AccountState.SUSPENDED
        assert exc_info.value.reason == "Cooling off"

    @pytest.mark.asyncio
    async def test_content_removed_soft_deletes_reported_user(
        self, unit_env, moderation_setup
    ):
        admin, reporter, target = await moderation_setup()
        moderation_service = await unit_env.get(ModerationService)
        user_repository = await unit_env.get(UserRepository)
        report = await report_user(unit_env, reporter, target)

        await moderation_service.process_report(
            report.id, admin, ReportAction.CONTENT_REMOVED
        )

        stored = await user_repository.find_by_id(target.id)
        assert stored is not None
        assert stored.is_deleted is True

    @pytest.mark.asyncio
    async def test_content_removed_deletes_reported_project(
        self, unit_env, moderation_setup
    ):
        admin, reporter, target = await moderation_setup()
        project_service = await unit_env.get(ProjectService)
        report_service = await unit_env.get(ReportService)
        moderation_service = await unit_env.get(ModerationService)
        project_repository = await unit_env.get(ProjectRepository)
        project = await project_service.create(target, title="Spam Landing Page")
        report = await report_service.create(
            reporter, ReportType.PROJECT, ReportReason.SPAM, "Ads", project_id=project.id
        )

        await moderation_service.process_report(
            report.id, admin, ReportAction.CONTENT_REMOVED
        )

        assert await project_repository.find_by_id(project.id) is None

    @pytest.mark.asyncio
    async def test_content_removed_deletes_reported_comment(
        self, unit_env, moderation_setup
    ):
        admin, reporter, target = await moderation_setup()
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)
        report_service = await unit_env.get(ReportService)
        moderation_service = await unit_env.get(ModerationService)
        project = await project_service.create(reporter, title="Drum Machine")
        comment = await comment_service.add(project.id, target, "Buy followers here")
        report = await report_service.create(
            reporter, ReportType.COMMENT, ReportReason.SPAM, "Ads", comment_id=comment.id
        )

        await moderation_service.process_report(
            report.id, admin, ReportAction.CONTENT_REMOVED
        )

        assert await comment_service.list_for_project(project.id) == []

    @pytest.mark.asyncio
    async def test_cannot_remove_another_admins_project(
        self, unit_env, moderation_setup
    ):
        """Another admin's content stays until their role is revoked."""
        admin, reporter, target = await moderation_setup()
        user_repository = await unit_env.get(UserRepository)
        project_service = await unit_env.get(ProjectService)
        report_service = await unit_env.get(ReportService)
        moderation_service = await unit_env.get(ModerationService)
        project_repository = await unit_env.get(ProjectRepository)
        await update_user(user_repository, target, is_admin=True)
        project = await project_service.create(target, title="Admin Notes")
        report = await report_service.create(
            reporter, ReportType.PROJECT, ReportReason.SPAM, "Ads", project_id=project.id
        )

        with pytest.raises(PermissionDeniedError):
            await moderation_service.process_report(
                report.id, admin, ReportAction.CONTENT_REMOVED
            )
        with pytest.raises(PermissionDeniedError):
            await moderation_service.delete_project(admin, project.id)

        assert await project_repository.find_by_id(project.id) is not None


class TestReportStatus:
    """Closed reports stay closed."""

    @pytest.mark.asyncio
    async def test_resolved_report_cannot_be_rejected(self, unit_env, moderation_setup):
        admin, reporter, target = await moderation_setup()
        moderation_service = await unit_env.get(ModerationService)
        report_service = await unit_env.get(ReportService)
        report = await report_user(unit_env, reporter, target)
        await moderation_service.process_report(
            report.id, admin, ReportAction.ACCOUNT_BANNED, reason="Spam links"
        )

        with pytest.raises(BusinessRuleViolationError):
            await report_service.reject(report.id, admin, "Changed my mind")
        with pytest.raises(BusinessRuleViolationError):
            await report_service.update_status(report.id, admin, ReportStatus.PENDING)

        stored = await report_service.get_by_id(report.id)
        assert stored.status == ReportStatus.RESOLVED
        assert stored.action == ReportAction.ACCOUNT_BANNED

    @pytest.mark.asyncio
    async def test_rejected_report_cannot_be_processed(self, unit_env, moderation_setup):
        admin, reporter, target = await moderation_setup()
        moderation_service = await unit_env.get(ModerationService)
        report_service = await unit_env.get(ReportService)
        report = await report_user(unit_env, reporter, target)
        await report_service.reject(report.id, admin)

        with pytest.raises(BusinessRuleViolationError):
            await moderation_service.process_report(
                report.id, admin, ReportAction.ACCOUNT_BANNED, reason="Spam"
            )

    @pytest.mark.asyncio
    async def test_open_report_moves_through_review(self, unit_env, moderation_setup):
        admin, reporter, target = await moderation_setup()
        report_service = await unit_env.get(ReportService)
        report = await report_user(unit_env, reporter, target)

        reviewing = await report_service.update_status(
            report.id, admin, ReportStatus.REVIEWING, "Looking into it"
        )
        rejected = await report_service.reject(report.id, admin)

        assert reviewing.status == ReportStatus.REVIEWING
        assert reviewing.admin_notes == "Looking into it"
        assert reviewing.reviewed_by == admin.id
        assert rejected.status == ReportStatus.REJECTED

    @pytest.mark.asyncio
    async def test_resolving_needs_an_action(self, unit_env, moderation_setup):
        admin, reporter, target = await moderation_setup()
        report_service = await unit_env.get(ReportService)
        report = await report_user(unit_env, reporter, target)

        with pytest.raises(BusinessRuleViolationError):
            await report_service.update_status(report.id, admin, ReportStatus.RESOLVED)
