"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.notification import Notification
from folio.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for notifications."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: Notification identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 50) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            user_id: Recipient's user ID
            limit: Maximum number of notifications to return

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update)."""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> bool:
        """Mark one notification read.

        Returns:
            True if the notification exists
        """
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification.

        Returns:
            True if a notification was deleted, False if none existed
        """
        pass
