"""Unit tests for ReportService."""

from uuid import uuid4

import pytest

from folio.domain.error import NotFoundError, ValidationError
from folio.domain.service import (
    AuthService,
    CommentService,
    ProjectService,
    ReportService,
)
from folio.domain.value import (
    CommentId,
    ReportReason,
    ReportStatus,
    ReportType,
)
from tests.conftest import register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateReport:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_project_report_targets_owner(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        report_service = await unit_env.get(ReportService)
        owner = await register_user(auth_service, "owner")
        reporter = await register_user(auth_service, "reporter")
        project = await project_service.create(owner, title="Knockoff Game")

        # Act
        report = await report_service.create(
            reporter,
            ReportType.PROJECT,
            ReportReason.COPYRIGHT_VIOLATION,
            "  Copied assets  ",
            project_id=project.id,
        )

        # Assert
        assert report.target_user_id == owner.id
        assert report.target_project_id == project.id
        assert report.target_comment_id is None
        assert report.status == ReportStatus.PENDING
        assert report.description == "Copied assets"

    @pytest.mark.asyncio
    async def test_comment_report_targets_author(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)
        report_service = await unit_env.get(ReportService)
        owner = await register_user(auth_service, "owner")
        author = await register_user(auth_service, "author")
        project = await project_service.create(owner, title="Tiny Compiler")
        comment = await comment_service.add(project.id, author, "Rude remark")

        report = await report_service.create(
            owner,
            ReportType.COMMENT,
            ReportReason.HARASSMENT,
            "Insulting",
            comment_id=comment.id,
        )

        assert report.target_user_id == author.id
        assert report.target_project_id == project.id
        assert report.target_comment_id == comment.id

    @pytest.mark.asyncio
    async def test_reporting_yourself_is_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        report_service = await unit_env.get(ReportService)
        owner = await register_user(auth_service, "owner")
        project = await project_service.create(owner, title="My Own Work")

        with pytest.raises(ValidationError, match="yourself"):
            await report_service.create(
                owner, ReportType.USER, ReportReason.SPAM, "", user_id=owner.id
            )
        with pytest.raises(ValidationError, match="yourself"):
            await report_service.create(
                owner, ReportType.PROJECT, ReportReason.SPAM, "", project_id=project.id
            )

    @pytest.mark.asyncio
    async def test_missing_target_id_is_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        report_service = await unit_env.get(ReportService)
        reporter = await register_user(auth_service, "reporter")

        with pytest.raises(ValidationError):
            await report_service.create(reporter, ReportType.USER, ReportReason.SPAM, "")

    @pytest.mark.asyncio
    async def test_unknown_comment_is_not_found(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        report_service = await unit_env.get(ReportService)
        reporter = await register_user(auth_service, "reporter")

        with pytest.raises(NotFoundError):
            await report_service.create(
                reporter,
                ReportType.COMMENT,
                ReportReason.SPAM,
                "",
                comment_id=CommentId(uuid4()),
            )


class TestReportStats:
    """Tests for stats."""

    @pytest.mark.asyncio
    async def test_counts_by_status_and_type(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        report_service = await unit_env.get(ReportService)
        reporter = await register_user(auth_service, "reporter")
        first = await register_user(auth_service, "first")
        second = await register_user(auth_service, "second")
        for target in (first, second):
            await report_service.create(
                reporter, ReportType.USER, ReportReason.SPAM, "", user_id=target.id
            )

        stats = await report_service.stats()

        assert stats.total == 2
        assert stats.by_status[ReportStatus.PENDING] == 2
        assert stats.by_status[ReportStatus.RESOLVED] == 0
        assert stats.by_type[ReportType.USER] == 2
        assert stats.by_type[ReportType.COMMENT] == 0
