"""In-memory notification repository for testing."""

from typing import Optional

from folio.domain.model.notification import Notification
from folio.domain.repository.notification import NotificationRepository
from folio.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_user(self, user_id: UserId, limit: int = 50) -> list[Notification]:
        """Find a user's notifications, newest first."""
        mine = [n for n in self._notifications.values() if n.user_id == user_id]
        mine.sort(key=lambda n: n.created_at, reverse=True)
        return mine[:limit]

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.user_id == user_id and not n.is_read
        )

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Mark one notification read."""
        notification = self._notifications.get(notification_id)
        if notification is None:
            return False
        self._notifications[notification_id] = notification.model_copy(
            update={"is_read": True}
        )
        return True

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read."""
        updated = 0
        for notification in list(self._notifications.values()):
            if notification.user_id == user_id and not notification.is_read:
                self._notifications[notification.id] = notification.model_copy(
                    update={"is_read": True}
                )
                updated += 1
        return updated

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        return self._notifications.pop(notification_id, None) is not None
