"""User aggregate root.

Users sign up with a username, email and password, publish projects and
follow each other. Relationships (follows, requests, blocks) and saved
projects are stored as separate sets, see RelationshipRepository.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import AccountState, PrivacySettings, ReportId, UserId, WarningId
from folio.domain.value.types import Username


class AccountWarning(DomainModel):
    """A moderation warning recorded against a user."""

    id: WarningId
    user_id: UserId
    reason: str
    issued_by: UserId
    report_id: Optional[ReportId] = None
    issued_at: datetime = Field(default_factory=datetime.now)


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: str
    name: str = Field(min_length=1, max_length=100)
    password_hash: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    privacy: PrivacySettings = PrivacySettings()
    is_admin: bool = False

    # Moderation state
    is_suspended: bool = False
    suspended_reason: Optional[str] = None
    suspended_at: Optional[datetime] = None
    is_banned: bool = False
    banned_reason: Optional[str] = None
    banned_at: Optional[datetime] = None
    is_deleted: bool = False
    deleted_reason: Optional[str] = None
    deleted_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def account_state(self) -> AccountState | None:
        """Blocking account state, most severe first."""
        if self.is_deleted:
            return AccountState.DELETED
        if self.is_banned:
            return AccountState.BANNED
        if self.is_suspended:
            return AccountState.SUSPENDED
        return None

    @property
    def account_state_reason(self) -> str | None:
        state = self.account_state
        if state == AccountState.DELETED:
            return self.deleted_reason
        if state == AccountState.BANNED:
            return self.banned_reason
        if state == AccountState.SUSPENDED:
            return self.suspended_reason
        return None

    @property
    def is_active(self) -> bool:
        return self.account_state is None
