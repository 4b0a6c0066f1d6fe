"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from folio.domain.error import NotAuthorizedError, NotFoundError
from folio.domain.service import AuthService, NotificationService
from folio.domain.value import NotificationId, NotificationType
from tests.conftest import register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def inbox(unit_env):
    """A recipient with two notifications from a sender."""

    async def _setup():
        auth_service = await unit_env.get(AuthService)
        notification_service = await unit_env.get(NotificationService)
        recipient = await register_user(auth_service, "recipient")
        sender = await register_user(auth_service, "sender")
        first = await notification_service.notify(
            recipient.id, sender.id, NotificationType.FOLLOW, "sender followed you"
        )
        second = await notification_service.notify(
            recipient.id, sender.id, NotificationType.LIKE, "sender liked your project"
        )
        return recipient, sender, first, second

    return _setup


class TestNotify:
    """Tests for notify."""

    @pytest.mark.asyncio
    async def test_no_notification_to_self(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        notification_service = await unit_env.get(NotificationService)
        user = await register_user(auth_service, "loner")

        result = await notification_service.notify(
            user.id, user.id, NotificationType.LIKE, "you liked yourself"
        )

        assert result is None


class TestReadState:
    """Tests for mark_read and mark_all_read."""

    @pytest.mark.asyncio
    async def test_mark_read(self, unit_env, inbox):
        recipient, _, first, second = await inbox()
        notification_service = await unit_env.get(NotificationService)

        await notification_service.mark_read(first.id, recipient.id)
        notifications, unread = await notification_service.list_for_user(
            recipient.id, unread_only=True, limit=50
        )

        assert unread == 1
        assert [n.id for n in notifications] == [second.id]

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env, inbox):
        recipient, _, _, _ = await inbox()
        notification_service = await unit_env.get(NotificationService)

        count = await notification_service.mark_all_read(recipient.id)
        everything, unread = await notification_service.list_for_user(
            recipient.id, unread_only=False, limit=50
        )

        assert count == 2
        assert unread == 0
        assert len(everything) == 2
        assert all(n.read for n in everything)

    @pytest.mark.asyncio
    async def test_only_recipient_may_mark_read(self, unit_env, inbox):
        _, sender, first, _ = await inbox()
        notification_service = await unit_env.get(NotificationService)

        with pytest.raises(NotAuthorizedError):
            await notification_service.mark_read(first.id, sender.id)


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_recipient_deletes(self, unit_env, inbox):
        recipient, _, first, second = await inbox()
        notification_service = await unit_env.get(NotificationService)

        await notification_service.delete(first.id, recipient.id)
        notifications, _ = await notification_service.list_for_user(
            recipient.id, unread_only=False, limit=50
        )

        assert [n.id for n in notifications] == [second.id]

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env, inbox):
        recipient, sender, first, _ = await inbox()
        notification_service = await unit_env.get(NotificationService)

        with pytest.raises(NotAuthorizedError):
            await notification_service.delete(first.id, sender.id)

        notifications, _ = await notification_service.list_for_user(
            recipient.id, unread_only=False, limit=50
        )
        assert len(notifications) == 2

    @pytest.mark.asyncio
    async def test_unknown_notification(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        notification_service = await unit_env.get(NotificationService)
        user = await register_user(auth_service, "recipient")

        with pytest.raises(NotFoundError):
            await notification_service.delete(NotificationId(uuid4()), user.id)
