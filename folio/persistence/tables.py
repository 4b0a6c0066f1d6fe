"""SQLAlchemy table definitions for Folio.

These tables are used with SQLAlchemy Core; rows are mapped to the frozen
domain models in ``folio.persistence.mappers``. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

from folio.domain.value import (
    ActivityAction,
    CollaboratorRole,
    NotificationType,
    ProjectVisibility,
    ReportAction,
    ReportReason,
    ReportStatus,
    ReportType,
)

# Metadata object for all tables
metadata = MetaData()


def _enum(enum_cls, name: str) -> Enum:
    """Postgres ENUM column type storing the enum's values (created in migrations)."""
    return Enum(*[member.value for member in enum_cls], name=name, create_type=False)


def _timestamp(name: str, nullable: bool = False) -> Column:
    if nullable:
        return Column(name, TIMESTAMP(timezone=True), nullable=True)
    return Column(
        name, TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    )


# ============================================================================
# USERS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(100), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("bio", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    # Privacy flags
    Column("is_private", Boolean, nullable=False, server_default="false"),
    Column("show_followers", Boolean, nullable=False, server_default="true"),
    Column("show_following", Boolean, nullable=False, server_default="true"),
    Column("allow_follow_requests", Boolean, nullable=False, server_default="true"),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    # Moderation state
    Column("is_suspended", Boolean, nullable=False, server_default="false"),
    Column("suspended_reason", Text, nullable=True),
    _timestamp("suspended_at", nullable=True),
    Column("is_banned", Boolean, nullable=False, server_default="false"),
    Column("banned_reason", Text, nullable=True),
    _timestamp("banned_at", nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_reason", Text, nullable=True),
    _timestamp("deleted_at", nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_users_created_at", users_table.c.created_at.desc())

user_warnings_table = Table(
    "user_warnings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("reason", Text, nullable=False),
    Column("issued_by", UUID, ForeignKey("users.id"), nullable=False),
    Column("report_id", UUID, nullable=True),
    _timestamp("issued_at"),
)

Index("idx_user_warnings_user_id", user_warnings_table.c.user_id)

# ============================================================================
# RELATIONSHIPS (directed edges, one row per pair)
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column(
        "follower_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "followee_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    _timestamp("created_at"),
    PrimaryKeyConstraint("follower_id", "followee_id", name="pk_follows"),
)

Index("idx_follows_followee_id", follows_table.c.followee_id)

follow_requests_table = Table(
    "follow_requests",
    metadata,
    Column(
        "requester_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "target_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    _timestamp("created_at"),
    PrimaryKeyConstraint("requester_id", "target_id", name="pk_follow_requests"),
)

Index("idx_follow_requests_target_id", follow_requests_table.c.target_id)

blocks_table = Table(
    "blocks",
    metadata,
    Column(
        "blocker_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "blocked_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    _timestamp("created_at"),
    PrimaryKeyConstraint("blocker_id", "blocked_id", name="pk_blocks"),
)

# ============================================================================
# PROJECTS
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(200), nullable=False),
    Column("slug", String(120), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("live_url", Text, nullable=True),
    Column("repo_url", Text, nullable=True),
    Column("tags", ARRAY(String(40)), nullable=False, server_default="{}"),
    Column("images", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "visibility",
        _enum(ProjectVisibility, "project_visibility"),
        nullable=False,
        server_default="public",
    ),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_projects_owner_id", projects_table.c.owner_id)
Index("idx_projects_created_at", projects_table.c.created_at.desc())
Index("idx_projects_tags", projects_table.c.tags, postgresql_using="gin")

project_likes_table = Table(
    "project_likes",
    metadata,
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    _timestamp("created_at"),
    PrimaryKeyConstraint("project_id", "user_id", name="pk_project_likes"),
)

saved_projects_table = Table(
    "saved_projects",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    ),
    _timestamp("created_at"),
    PrimaryKeyConstraint("user_id", "project_id", name="pk_saved_projects"),
)

# ============================================================================
# COMMENTS
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", String(1000), nullable=False),
    _timestamp("created_at"),
    _timestamp("updated_at"),
)

Index("idx_comments_project_id", comments_table.c.project_id)

comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column(
        "comment_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    _timestamp("created_at"),
    PrimaryKeyConstraint("comment_id", "user_id", name="pk_comment_likes"),
)

# ============================================================================
# COLLABORATION
# ============================================================================
collaborators_table = Table(
    "collaborators",
    metadata,
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", _enum(CollaboratorRole, "collaborator_role"), nullable=False),
    Column("added_by", UUID, ForeignKey("users.id"), nullable=False),
    _timestamp("added_at"),
    PrimaryKeyConstraint("project_id", "user_id", name="pk_collaborators"),
)

Index("idx_collaborators_user_id", collaborators_table.c.user_id)

invitations_table = Table(
    "invitations",
    metadata,
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", _enum(CollaboratorRole, "collaborator_role"), nullable=False),
    Column("invited_by", UUID, ForeignKey("users.id"), nullable=False),
    _timestamp("invited_at"),
    PrimaryKeyConstraint("project_id", "user_id", name="pk_invitations"),
)

Index("idx_invitations_user_id", invitations_table.c.user_id)

# ============================================================================
# NOTIFICATIONS
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipient_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "sender_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", _enum(NotificationType, "notification_type"), nullable=False),
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True
    ),
    Column("message", Text, nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    _timestamp("created_at"),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# REPORTS
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "reporter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", _enum(ReportType, "report_type"), nullable=False),
    Column(
        "target_user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Projects and comments may be removed while the report is kept
    Column("target_project_id", UUID, nullable=True),
    Column("target_comment_id", UUID, nullable=True),
    Column("reason", _enum(ReportReason, "report_reason"), nullable=False),
    Column("description", String(1000), nullable=False),
    Column(
        "status",
        _enum(ReportStatus, "report_status"),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "action",
        _enum(ReportAction, "report_action"),
        nullable=False,
        server_default="none",
    ),
    Column("reviewed_by", UUID, ForeignKey("users.id"), nullable=True),
    Column("admin_notes", Text, nullable=True),
    _timestamp("reviewed_at", nullable=True),
    _timestamp("created_at"),
    _timestamp("updated_at"),
    CheckConstraint("char_length(description) >= 10", name="description_min_length"),
)

Index("idx_reports_status_created", reports_table.c.status, reports_table.c.created_at)

# ============================================================================
# ANALYTICS
# ============================================================================
project_stats_table = Table(
    "project_stats",
    metadata,
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("comments", Integer, nullable=False, server_default="0"),
    _timestamp("last_updated"),
    CheckConstraint(
        "views >= 0 AND likes >= 0 AND comments >= 0", name="stats_non_negative"
    ),
)

project_daily_stats_table = Table(
    "project_daily_stats",
    metadata,
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    ),
    Column("day", Date, nullable=False),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("comments", Integer, nullable=False, server_default="0"),
    PrimaryKeyConstraint("project_id", "day", name="pk_project_daily_stats"),
)

Index("idx_project_daily_stats_day", project_daily_stats_table.c.day)

project_viewers_table = Table(
    "project_viewers",
    metadata,
    Column(
        "project_id", UUID, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    _timestamp("first_viewed_at"),
    PrimaryKeyConstraint("project_id", "user_id", name="pk_project_viewers"),
)

activity_logs_table = Table(
    "activity_logs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("action", _enum(ActivityAction, "activity_action"), nullable=False),
    # Kept after the project is deleted
    Column("project_id", UUID, nullable=True),
    Column("project_title", String(200), nullable=True),
    Column("target_user_id", UUID, nullable=True),
    Column("description", Text, nullable=True),
    _timestamp("created_at"),
)

Index(
    "idx_activity_logs_user_created",
    activity_logs_table.c.user_id,
    activity_logs_table.c.created_at.desc(),
)
Index("idx_activity_logs_created_at", activity_logs_table.c.created_at)
