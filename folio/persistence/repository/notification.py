"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.value import NotificationId, UserId
from folio.persistence.mappers import notification_to_dict, row_to_notification
from folio.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId, limit: int = 50) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        values = notification_to_dict(notification)
        stmt = insert(notifications_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[notifications_table.c.id],
            set_={"is_read": stmt.excluded.is_read},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Mark one notification read."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
