"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.value import NotificationId, UserId
from folio.persistence.mappers import row_to_notification
from folio.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_by_recipient(
        self, recipient_id: UserId, unread_only: bool, limit: int
    ) -> List[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.read.is_(False))
        stmt = stmt.order_by(notifications_table.c.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_unread(self, recipient_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, notification: Notification) -> Notification:
        data = notification.model_dump()
        data["type"] = notification.type.value
        await self.session.execute(notifications_table.insert().values(**data))
        await self.session.flush()
        return notification

    async def mark_read(self, notification_id: NotificationId) -> None:
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(read=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def mark_all_read(self, recipient_id: UserId) -> int:
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(False),
            )
            .values(read=True)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        updated = len(result.all())
        await self.session.flush()
        return updated

    async def delete(self, notification_id: NotificationId) -> bool:
        stmt = (
            delete(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted
