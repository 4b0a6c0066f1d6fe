"""In-memory notification repository for testing."""

from typing import Optional

from folio.domain.model import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.value import NotificationId, UserId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        return self._store.notifications.get(notification_id)

    async def find_by_recipient(
        self, recipient_id: UserId, unread_only: bool, limit: int
    ) -> list[Notification]:
        notifications = [
            n
            for n in reversed(self._store.notifications.values())
            if n.recipient_id == recipient_id and not (unread_only and n.read)
        ]
        return notifications[:limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        return sum(
            1
            for n in self._store.notifications.values()
            if n.recipient_id == recipient_id and not n.read
        )

    async def save(self, notification: Notification) -> Notification:
        self._store.notifications[notification.id] = notification
        return notification

    async def mark_read(self, notification_id: NotificationId) -> None:
        notification = self._store.notifications.get(notification_id)
        if notification:
            self._store.notifications[notification_id] = notification.model_copy(
                update={"read": True}
            )

    async def mark_all_read(self, recipient_id: UserId) -> int:
        unread = [
            n
            for n in self._store.notifications.values()
            if n.recipient_id == recipient_id and not n.read
        ]
        for notification in unread:
            self._store.notifications[notification.id] = notification.model_copy(
                update={"read": True}
            )
        return len(unread)

    async def delete(self, notification_id: NotificationId) -> bool:
        return self._store.notifications.pop(notification_id, None) is not None
