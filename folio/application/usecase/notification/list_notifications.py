"""Notification use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import (
    ApiModel,
    SuccessResponse,
    UserSummary,
    user_summary,
)
from folio.config import FeedSettings
from folio.domain.service import NotificationService, UserService
from folio.domain.value import NotificationId, NotificationType, UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str
    unread_only: bool = False


class NotificationInfo(ApiModel):
    """A notification with its sender."""

    id: str
    type: NotificationType
    message: str
    read: bool
    project_id: str | None
    sender: UserSummary | None
    created_at: datetime


class ListNotificationsResponse(ApiModel):
    """Newest notifications and the unread count."""

    notifications: list[NotificationInfo]
    unread_count: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for polling the caller's notifications."""

    def __init__(
        self,
        notification_service: NotificationService,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            user_service: Sender lookups
            feed_settings: List size limit
        """
        self.notification_service = notification_service
        self.user_service = user_service
        self.feed_settings = feed_settings

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications, unread = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id)),
            unread_only=request.unread_only,
            limit=self.feed_settings.notifications_limit,
        )
        senders = await self.user_service.get_many(
            list({n.sender_id for n in notifications})
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationInfo(
                    id=str(n.id),
                    type=n.type,
                    message=n.message,
                    read=n.read,
                    project_id=str(n.project_id) if n.project_id else None,
                    sender=(
                        user_summary(senders[n.sender_id])
                        if n.sender_id in senders
                        else None
                    ),
                    created_at=n.created_at,
                )
                for n in notifications
            ],
            unread_count=unread,
        )


class NotificationActionRequest(BaseModel):
    """The recipient acting on one notification."""

    user_id: str
    notification_id: str


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationActionRequest) -> SuccessResponse:
        """Mark as read.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another user
        """
        await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return SuccessResponse(message="Notification marked as read")


class MarkAllReadRequest(BaseModel):
    """Mark all of the caller's notifications as read."""

    user_id: str


class MarkAllReadResponse(ApiModel):
    """How many notifications changed."""

    success: bool = True
    updated: int


class MarkAllNotificationsReadUseCase(BaseUseCase):
    """Use case for clearing the unread count."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        count = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllReadResponse(updated=count)


class DeleteNotificationUseCase(BaseUseCase):
    """Use case for deleting one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationActionRequest) -> SuccessResponse:
        await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return SuccessResponse(message="Notification deleted")
