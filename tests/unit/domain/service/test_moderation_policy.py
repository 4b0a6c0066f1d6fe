"""Unit tests for the moderation policy."""

from uuid import uuid4

import pytest

from folio.domain.error import PermissionDeniedError
from folio.domain.model import User
from folio.domain.service.moderation_policy import ensure_can_moderate
from folio.domain.value import ModerationAction, UserId
from folio.domain.value.types import Username


def make_user(username: str, is_admin: bool = False) -> User:
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        name=username,
        password_hash="x",
        is_admin=is_admin,
    )


class TestEnsureCanModerate:
    """Tests for ensure_can_moderate."""

    def test_admin_can_suspend_regular_user(self):
        admin = make_user("admin", is_admin=True)
        target = make_user("alice")

        ensure_can_moderate(admin, target, ModerationAction.SUSPEND)

    def test_non_admin_is_rejected(self):
        with pytest.raises(PermissionDeniedError, match="Admin privileges required"):
            ensure_can_moderate(make_user("bob"), make_user("alice"), ModerationAction.BAN)

    @pytest.mark.parametrize(
        "action",
        [
            ModerationAction.SUSPEND,
            ModerationAction.BAN,
            ModerationAction.DELETE,
            ModerationAction.REVOKE_ADMIN,
        ],
    )
    def test_admin_cannot_act_on_self(self, action):
        admin = make_user("admin", is_admin=True)

        with pytest.raises(PermissionDeniedError, match="yourself"):
            ensure_can_moderate(admin, admin, action)

    def test_admin_cannot_ban_another_admin(self):
        """Another admin's role must be revoked before moderating them."""
        admin = make_user("admin", is_admin=True)
        other = make_user("other_admin", is_admin=True)

        with pytest.raises(PermissionDeniedError, match="Revoke"):
            ensure_can_moderate(admin, other, ModerationAction.BAN)

    def test_admin_can_revoke_another_admin(self):
        admin = make_user("admin", is_admin=True)
        other = make_user("other_admin", is_admin=True)

        ensure_can_moderate(admin, other, ModerationAction.REVOKE_ADMIN)
