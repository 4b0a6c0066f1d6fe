"""Mappers for converting between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from folio.domain.model import (
    AccountWarning,
    ActivityEntry,
    Collaborator,
    Comment,
    Invitation,
    Notification,
    Project,
    Report,
    User,
)
from folio.domain.value import PrivacySettings, Slug, TagName, UserId
from folio.domain.value.types import Username

PRIVACY_COLUMNS = ("is_private", "show_followers", "show_following", "allow_follow_requests")


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        name=row["name"],
        password_hash=row["password_hash"],
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        privacy=PrivacySettings(**{column: row[column] for column in PRIVACY_COLUMNS}),
        is_admin=row["is_admin"],
        is_suspended=row["is_suspended"],
        suspended_reason=row.get("suspended_reason"),
        suspended_at=row.get("suspended_at"),
        is_banned=row["is_banned"],
        banned_reason=row.get("banned_reason"),
        banned_at=row.get("banned_at"),
        is_deleted=row["is_deleted"],
        deleted_reason=row.get("deleted_reason"),
        deleted_at=row.get("deleted_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Privacy settings are flattened into their own columns.
    """
    data = user.model_dump(exclude={"privacy"})
    data.update(user.privacy.model_dump())
    return data


def row_to_warning(row: Dict[str, Any]) -> AccountWarning:
    return AccountWarning(
        id=row["id"],
        user_id=row["user_id"],
        reason=row["reason"],
        issued_by=row["issued_by"],
        report_id=row.get("report_id"),
        issued_at=row["issued_at"],
    )


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model."""
    return Project(
        id=_uuid(row["id"]),
        owner_id=_uuid(row["owner_id"]),
        title=row["title"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        live_url=row.get("live_url"),
        repo_url=row.get("repo_url"),
        tags=[TagName(tag) for tag in row.get("tags") or []],
        images=list(row.get("images") or []),
        visibility=row["visibility"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    data = project.model_dump()
    data["visibility"] = project.visibility.value
    return data


def row_to_collaborator(row: Dict[str, Any]) -> Collaborator:
    return Collaborator(
        project_id=row["project_id"],
        user_id=row["user_id"],
        role=row["role"],
        added_by=row["added_by"],
        added_at=row["added_at"],
    )


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    return Invitation(
        project_id=row["project_id"],
        user_id=row["user_id"],
        role=row["role"],
        invited_by=row["invited_by"],
        invited_at=row["invited_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=_uuid(row["id"]),
        project_id=_uuid(row["project_id"]),
        author_id=_uuid(row["author_id"]),
        text=row["text"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_notification(row: Dict[str, Any]) -> Notification:
    return Notification(
        id=row["id"],
        recipient_id=row["recipient_id"],
        sender_id=row["sender_id"],
        type=row["type"],
        project_id=row.get("project_id"),
        message=row["message"],
        read=row["read"],
        created_at=row["created_at"],
    )


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=row["id"],
        reporter_id=row["reporter_id"],
        type=row["type"],
        target_user_id=row["target_user_id"],
        target_project_id=row.get("target_project_id"),
        target_comment_id=row.get("target_comment_id"),
        reason=row["reason"],
        description=row["description"],
        status=row["status"],
        action=row["action"],
        reviewed_by=row.get("reviewed_by"),
        admin_notes=row.get("admin_notes"),
        reviewed_at=row.get("reviewed_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    return report.model_dump(mode="python")


def row_to_activity(row: Dict[str, Any]) -> ActivityEntry:
    return ActivityEntry(
        id=row["id"],
        user_id=row["user_id"],
        action=row["action"],
        project_id=row.get("project_id"),
        project_title=row.get("project_title"),
        target_user_id=row.get("target_user_id"),
        description=row.get("description"),
        created_at=row["created_at"],
    )
