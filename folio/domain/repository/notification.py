"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.notification import Notification
from folio.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, unread_only: bool, limit: int
    ) -> List[Notification]:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Recipient user
            unread_only: Only include unread notifications
            limit: Maximum number returned

        Returns:
            Notifications, newest first
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> None:
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        pass
