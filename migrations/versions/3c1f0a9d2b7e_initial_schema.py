"""initial_schema

Create the Folio schema:
- Users (password auth, privacy flags, moderation state) and warnings
- Follows, follow requests and blocks
- Projects with likes and saves
- Comments with likes
- Collaborators and pending invitations
- Notifications and reports
- Analytics counters, daily buckets, unique viewers and the activity log

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUMS: dict[str, tuple[str, ...]] = {
    "project_visibility": ("public", "private"),
    "collaborator_role": ("viewer", "editor"),
    "notification_type": (
        "like",
        "comment",
        "follow",
        "follow_request",
        "invitation",
        "invitation_accepted",
        "invitation_rejected",
        "warning",
    ),
    "report_type": ("user", "project", "comment"),
    "report_reason": (
        "spam",
        "harassment",
        "hate_speech",
        "inappropriate_content",
        "copyright_violation",
        "fake_account",
        "scam",
        "adult_content",
        "other",
    ),
    "report_status": ("pending", "reviewing", "resolved", "rejected"),
    "report_action": (
        "none",
        "warning",
        "content_removed",
        "account_suspended",
        "account_banned",
    ),
    "activity_action": (
        "project_created",
        "project_updated",
        "project_deleted",
        "project_viewed",
        "project_liked",
        "project_unliked",
        "comment_added",
        "comment_deleted",
        "collaborator_added",
        "collaborator_removed",
        "profile_updated",
        "password_changed",
        "user_followed",
        "user_unfollowed",
        "user_blocked",
        "user_unblocked",
        "login",
        "logout",
        "privacy_changed",
    ),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def _id() -> sa.Column:
    return sa.Column(
        "id", sa.UUID(), server_default=sa.text("uuid_generate_v4()"), nullable=False
    )


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    if nullable:
        return sa.Column(name, sa.TIMESTAMP(timezone=True), nullable=True)
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _user_fk(name: str, nullable: bool = False, cascade: bool = True) -> sa.Column:
    return sa.Column(
        name,
        sa.UUID(),
        sa.ForeignKey("users.id", ondelete="CASCADE" if cascade else None),
        nullable=nullable,
    )


def _project_fk(name: str = "project_id", nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.UUID(),
        sa.ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=nullable,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("is_private", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("show_followers", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("show_following", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "allow_follow_requests", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_suspended", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("suspended_reason", sa.Text(), nullable=True),
        _timestamp("suspended_at", nullable=True),
        sa.Column("is_banned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("banned_reason", sa.Text(), nullable=True),
        _timestamp("banned_at", nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("deleted_reason", sa.Text(), nullable=True),
        _timestamp("deleted_at", nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="users_username_key"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )
    op.create_index("idx_users_created_at", "users", [sa.text("created_at DESC")])

    op.create_table(
        "user_warnings",
        _id(),
        _user_fk("user_id"),
        sa.Column("reason", sa.Text(), nullable=False),
        _user_fk("issued_by", cascade=False),
        sa.Column("report_id", sa.UUID(), nullable=True),
        _timestamp("issued_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_user_warnings_user_id", "user_warnings", ["user_id"])

    # ========================================================================
    # RELATIONSHIPS
    # ========================================================================
    op.create_table(
        "follows",
        _user_fk("follower_id"),
        _user_fk("followee_id"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("follower_id", "followee_id", name="pk_follows"),
    )
    op.create_index("idx_follows_followee_id", "follows", ["followee_id"])

    op.create_table(
        "follow_requests",
        _user_fk("requester_id"),
        _user_fk("target_id"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("requester_id", "target_id", name="pk_follow_requests"),
    )
    op.create_index("idx_follow_requests_target_id", "follow_requests", ["target_id"])

    op.create_table(
        "blocks",
        _user_fk("blocker_id"),
        _user_fk("blocked_id"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("blocker_id", "blocked_id", name="pk_blocks"),
    )

    # ========================================================================
    # PROJECTS
    # ========================================================================
    op.create_table(
        "projects",
        _id(),
        _user_fk("owner_id"),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("live_url", sa.Text(), nullable=True),
        sa.Column("repo_url", sa.Text(), nullable=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(40)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "images", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        sa.Column(
            "visibility",
            _enum("project_visibility"),
            nullable=False,
            server_default="public",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="projects_slug_key"),
    )
    op.create_index("idx_projects_owner_id", "projects", ["owner_id"])
    op.create_index("idx_projects_created_at", "projects", [sa.text("created_at DESC")])
    op.create_index(
        "idx_projects_tags", "projects", ["tags"], postgresql_using="gin"
    )

    op.create_table(
        "project_likes",
        _project_fk(),
        _user_fk("user_id"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("project_id", "user_id", name="pk_project_likes"),
    )

    op.create_table(
        "saved_projects",
        _user_fk("user_id"),
        _project_fk(),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("user_id", "project_id", name="pk_saved_projects"),
    )

    # ========================================================================
    # COMMENTS
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        _project_fk(),
        _user_fk("author_id"),
        sa.Column("text", sa.String(1000), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_project_id", "comments", ["project_id"])

    op.create_table(
        "comment_likes",
        sa.Column(
            "comment_id",
            sa.UUID(),
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _user_fk("user_id"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("comment_id", "user_id", name="pk_comment_likes"),
    )

    # ========================================================================
    # COLLABORATION
    # ========================================================================
    op.create_table(
        "collaborators",
        _project_fk(),
        _user_fk("user_id"),
        sa.Column("role", _enum("collaborator_role"), nullable=False),
        _user_fk("added_by", cascade=False),
        _timestamp("added_at"),
        sa.PrimaryKeyConstraint("project_id", "user_id", name="pk_collaborators"),
    )
    op.create_index("idx_collaborators_user_id", "collaborators", ["user_id"])

    op.create_table(
        "invitations",
        _project_fk(),
        _user_fk("user_id"),
        sa.Column("role", _enum("collaborator_role"), nullable=False),
        _user_fk("invited_by", cascade=False),
        _timestamp("invited_at"),
        sa.PrimaryKeyConstraint("project_id", "user_id", name="pk_invitations"),
    )
    op.create_index("idx_invitations_user_id", "invitations", ["user_id"])

    # ========================================================================
    # NOTIFICATIONS
    # ========================================================================
    op.create_table(
        "notifications",
        _id(),
        _user_fk("recipient_id"),
        _user_fk("sender_id"),
        sa.Column("type", _enum("notification_type"), nullable=False),
        _project_fk(nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # REPORTS
    # ========================================================================
    op.create_table(
        "reports",
        _id(),
        _user_fk("reporter_id"),
        sa.Column("type", _enum("report_type"), nullable=False),
        _user_fk("target_user_id"),
        sa.Column("target_project_id", sa.UUID(), nullable=True),
        sa.Column("target_comment_id", sa.UUID(), nullable=True),
        sa.Column("reason", _enum("report_reason"), nullable=False),
        sa.Column("description", sa.String(1000), nullable=False),
        sa.Column(
            "status", _enum("report_status"), nullable=False, server_default="pending"
        ),
        sa.Column(
            "action", _enum("report_action"), nullable=False, server_default="none"
        ),
        _user_fk("reviewed_by", nullable=True, cascade=False),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        _timestamp("reviewed_at", nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(description) >= 10", name="description_min_length"
        ),
    )
    op.create_index(
        "idx_reports_status_created", "reports", ["status", "created_at"]
    )

    # ========================================================================
    # ANALYTICS
    # ========================================================================
    op.create_table(
        "project_stats",
        _project_fk(),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("last_updated"),
        sa.PrimaryKeyConstraint("project_id"),
        sa.CheckConstraint(
            "views >= 0 AND likes >= 0 AND comments >= 0", name="stats_non_negative"
        ),
    )

    op.create_table(
        "project_daily_stats",
        _project_fk(),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("project_id", "day", name="pk_project_daily_stats"),
    )
    op.create_index("idx_project_daily_stats_day", "project_daily_stats", ["day"])

    op.create_table(
        "project_viewers",
        _project_fk(),
        _user_fk("user_id"),
        _timestamp("first_viewed_at"),
        sa.PrimaryKeyConstraint("project_id", "user_id", name="pk_project_viewers"),
    )

    op.create_table(
        "activity_logs",
        _id(),
        _user_fk("user_id"),
        sa.Column("action", _enum("activity_action"), nullable=False),
        sa.Column("project_id", sa.UUID(), nullable=True),
        sa.Column("project_title", sa.String(200), nullable=True),
        sa.Column("target_user_id", sa.UUID(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_activity_logs_user_created",
        "activity_logs",
        ["user_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_activity_logs_created_at", "activity_logs", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "activity_logs",
        "project_viewers",
        "project_daily_stats",
        "project_stats",
        "reports",
        "notifications",
        "invitations",
        "collaborators",
        "comment_likes",
        "comments",
        "saved_projects",
        "project_likes",
        "projects",
        "blocks",
        "follow_requests",
        "follows",
        "user_warnings",
        "users",
    ):
        op.drop_table(table)

    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
