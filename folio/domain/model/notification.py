"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import NotificationId, NotificationType, ProjectId, UserId


class Notification(DomainModel):
    """Typed event addressed to a recipient, polled by clients."""

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    type: NotificationType
    project_id: Optional[ProjectId] = None
    message: str = ""
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
