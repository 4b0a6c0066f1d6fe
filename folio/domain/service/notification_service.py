"""Notification domain service."""

from uuid import uuid4

import logfire

from folio.domain.error import NotAuthorizedError, NotFoundError
from folio.domain.model import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.value import NotificationId, NotificationType, ProjectId, UserId

from .base import Service


class NotificationService(Service):
    """Creates and manages notifications.

    Notifications are fire-and-forget records; clients poll for them.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        type: NotificationType,
        message: str,
        project_id: ProjectId | None = None,
    ) -> Notification | None:
        """Create a notification unless the recipient is the sender.

        Args:
            recipient_id: User being notified
            sender_id: User whose action triggered the notification
            type: Notification type
            message: Human-readable text
            project_id: Related project, if any

        Returns:
            The created notification, or None when recipient == sender
        """
        if recipient_id == sender_id:
            return None

        notification = Notification(
            id=NotificationId(uuid4()),
            recipient_id=recipient_id,
            sender_id=sender_id,
            type=type,
            project_id=project_id,
            message=message,
        )
        saved = await self.notification_repository.save(notification)
        logfire.info(
            "Notification created",
            notification_id=str(saved.id),
            recipient_id=str(recipient_id),
            type=type.value,
        )
        return saved

    async def list_for_user(
        self, user_id: UserId, unread_only: bool, limit: int
    ) -> tuple[list[Notification], int]:
        """List a user's notifications with the unread count.

        Returns:
            Notifications (newest first) and the number still unread
        """
        with logfire.span("notification_service.list_for_user", user_id=str(user_id)):
            notifications = await self.notification_repository.find_by_recipient(
                user_id, unread_only=unread_only, limit=limit
            )
            unread = await self.notification_repository.count_unread(user_id)
            return notifications, unread

    async def _get_owned(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if not notification:
            raise NotFoundError("Notification", str(notification_id))
        if notification.recipient_id != user_id:
            raise NotAuthorizedError("notification", str(notification_id), str(user_id))
        return notification

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> None:
        """Mark one of the user's notifications as read.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another user
        """
        await self._get_owned(notification_id, user_id)
        await self.notification_repository.mark_read(notification_id)

    async def mark_all_read(self, user_id: UserId) -> int:
        count = await self.notification_repository.mark_all_read(user_id)
        logfire.info("Notifications marked read", user_id=str(user_id), count=count)
        return count

    async def delete(self, notification_id: NotificationId, user_id: UserId) -> None:
        """Delete one of the user's notifications."""
        await self._get_owned(notification_id, user_id)
        await self.notification_repository.delete(notification_id)
