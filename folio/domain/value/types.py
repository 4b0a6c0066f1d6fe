"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and scoring policy.
"""

import re
from enum import Enum

from pydantic import Field, computed_field, field_validator

from folio.domain.value.common import RootValueObject, ValueObject

# Popularity weights. Fixed policy: changing them changes every ranking.
VIEW_WEIGHT = 1
LIKE_WEIGHT = 10
COMMENT_WEIGHT = 15


class CollaboratorRole(str, Enum):
    """Role of a collaborator on a project."""

    VIEWER = "viewer"
    EDITOR = "editor"


class ProjectVisibility(str, Enum):
    """Who may see a project besides its owner and collaborators."""

    PUBLIC = "public"
    PRIVATE = "private"


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    INVITATION = "invitation"
    INVITATION_ACCEPTED = "invitation_accepted"
    INVITATION_REJECTED = "invitation_rejected"
    WARNING = "warning"


class ReportType(str, Enum):
    """What a report points at."""

    USER = "user"
    PROJECT = "project"
    COMMENT = "comment"


class ReportReason(str, Enum):
    """Why something was reported."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    COPYRIGHT_VIOLATION = "copyright_violation"
    FAKE_ACCOUNT = "fake_account"
    SCAM = "scam"
    ADULT_CONTENT = "adult_content"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Review state of a report."""

    PENDING = "pending"
    REVIEWING = "reviewing"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class ReportAction(str, Enum):
    """Outcome applied when a report is resolved."""

    NONE = "none"
    WARNING = "warning"
    CONTENT_REMOVED = "content_removed"
    ACCOUNT_SUSPENDED = "account_suspended"
    ACCOUNT_BANNED = "account_banned"


class ModerationAction(str, Enum):
    """Admin action subject to the moderation policy."""

    SUSPEND = "suspend"
    BAN = "ban"
    DELETE = "delete"
    REACTIVATE = "reactivate"
    WARN = "warn"
    GRANT_ADMIN = "grant_admin"
    REVOKE_ADMIN = "revoke_admin"


class AccountState(str, Enum):
    """Blocked account states surfaced to clients as a ``type`` discriminator."""

    SUSPENDED = "ACCOUNT_SUSPENDED"
    BANNED = "ACCOUNT_BANNED"
    DELETED = "ACCOUNT_DELETED"


class ModeratedFilter(str, Enum):
    """Filter for listing moderated accounts."""

    SUSPENDED = "suspended"
    BANNED = "banned"
    DELETED = "deleted"
    ALL = "all"


class FollowAction(str, Enum):
    """What a follow button does for a viewer."""

    NONE = "none"
    FOLLOW = "follow"
    REQUEST = "request"


class FollowStatus(str, Enum):
    """Result of a follow attempt."""

    FOLLOWING = "following"
    PENDING = "pending"


class ActivityAction(str, Enum):
    """Actions recorded in a user's activity log."""

    PROJECT_CREATED = "project_created"
    PROJECT_UPDATED = "project_updated"
    PROJECT_DELETED = "project_deleted"
    PROJECT_VIEWED = "project_viewed"
    PROJECT_LIKED = "project_liked"
    PROJECT_UNLIKED = "project_unliked"
    COMMENT_ADDED = "comment_added"
    COMMENT_DELETED = "comment_deleted"
    COLLABORATOR_ADDED = "collaborator_added"
    COLLABORATOR_REMOVED = "collaborator_removed"
    PROFILE_UPDATED = "profile_updated"
    PASSWORD_CHANGED = "password_changed"
    USER_FOLLOWED = "user_followed"
    USER_UNFOLLOWED = "user_unfollowed"
    USER_BLOCKED = "user_blocked"
    USER_UNBLOCKED = "user_unblocked"
    LOGIN = "login"
    LOGOUT = "logout"
    PRIVACY_CHANGED = "privacy_changed"


class Username(RootValueObject[str]):
    """Public, unique user handle.

    3-30 characters: letters, digits, underscore, dot or hyphen.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class Slug(RootValueObject[str]):
    """URL-safe project slug.

    Lowercase alphanumeric words joined by single hyphens, 1-120 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 120:
            raise ValueError("Slug must be 1-120 characters")
        return v


class TagName(RootValueObject[str]):
    """Project tag, normalized to lowercase."""

    @field_validator("root", mode="before")
    @classmethod
    def normalize_tag(cls, v: str) -> str:
        v = str(v).strip().lower()
        if len(v) < 1 or len(v) > 40:
            raise ValueError("Tag must be 1-40 characters")
        return v


class PrivacySettings(ValueObject):
    """User-level visibility flags."""

    is_private: bool = False
    show_followers: bool = True
    show_following: bool = True
    allow_follow_requests: bool = True


class EngagementStats(ValueObject):
    """View, like and comment counters with the derived popularity score."""

    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)

    @computed_field
    @property
    def engagement(self) -> int:
        """Total interactions."""
        return self.views + self.likes + self.comments

    @computed_field
    @property
    def popularity_score(self) -> int:
        """views*1 + likes*10 + comments*15."""
        return (
            self.views * VIEW_WEIGHT
            + self.likes * LIKE_WEIGHT
            + self.comments * COMMENT_WEIGHT
        )

    def __add__(self, other: "EngagementStats") -> "EngagementStats":
        return EngagementStats(
            views=self.views + other.views,
            likes=self.likes + other.likes,
            comments=self.comments + other.comments,
        )


class Capabilities(ValueObject):
    """What a viewer may do with another user's profile and content."""

    is_own_profile: bool = False
    can_view: bool = False
    can_interact: bool = False
    is_following: bool = False
    is_follower: bool = False
    is_blocked: bool = False
    is_blocked_by: bool = False
    has_pending_request: bool = False
    follow_action: FollowAction = FollowAction.NONE
