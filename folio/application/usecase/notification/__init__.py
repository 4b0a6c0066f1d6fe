"""Notification use cases."""

from .list_notifications import (
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkNotificationReadUseCase,
    NotificationActionRequest,
)

__all__ = [
    "DeleteNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkNotificationReadUseCase",
    "NotificationActionRequest",
]
