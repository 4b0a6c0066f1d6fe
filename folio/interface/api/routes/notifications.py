"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.common import SuccessResponse
from folio.application.usecase.notification import (
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
from folio.interface.api.auth import require_user

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    unread_only: bool = Query(default=False),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List the signed-in user's notifications, newest first.

    Args:
        list_notifications_use_case: List use case from DI
        get_current_user_use_case: Get current user use case from DI
        unread_only: Only return unread notifications
        authorization: Bearer token

    Returns:
        Notifications and the unread count
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user.id, unread_only=unread_only)
    )


@router.put("/read/all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> MarkAllReadResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await mark_all_read_use_case.execute(MarkAllReadRequest(user_id=user.id))


@router.put("/{notification_id}/read", response_model=SuccessResponse)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Mark one notification read. Recipient only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await mark_read_use_case.execute(
        NotificationActionRequest(user_id=user.id, notification_id=str(notification_id))
    )


@router.delete("/{notification_id}", response_model=SuccessResponse)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Delete a notification. Recipient only."""
    user = await require_user(authorization, get_current_user_use_case)
    return await delete_notification_use_case.execute(
        NotificationActionRequest(user_id=user.id, notification_id=str(notification_id))
    )
