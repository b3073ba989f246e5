"""Notification domain service."""

from dataclasses import dataclass, field

import logfire

from folio.domain.error import NotAuthorizedError, NotFoundError
from folio.domain.model.notification import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.value import NotificationId, UserId

from .base import Service


@dataclass(frozen=True)
class Inbox:
    """A user's latest notifications and how many are unread."""

    notifications: list[Notification] = field(default_factory=list)
    unread_count: int = 0


class NotificationService(Service):
    """Domain service for reading and managing notifications.

    Notifications are created by other parts of the platform; this service
    only lets the recipient read, mark and delete them.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def list_notifications(self, user_id: UserId, limit: int = 50) -> Inbox:
        """Get a user's latest notifications.

        Args:
            user_id: Recipient
            limit: Maximum number of notifications

        Returns:
            Inbox with notifications newest first and the unread count
        """
        with logfire.span(
            "notification_service.list_notifications", user_id=str(user_id), limit=limit
        ):
            notifications = await self.notification_repository.find_by_user(
                user_id, limit=limit
            )
            unread = await self.notification_repository.count_unread(user_id)
            logfire.info(
                "Notifications retrieved", count=len(notifications), unread=unread
            )
            return Inbox(notifications=notifications, unread_count=unread)

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> None:
        """Mark one notification read.

        Raises:
            NotFoundError: If the notification doesn't exist
            NotAuthorizedError: If it belongs to someone else
        """
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            await self._get_owned(notification_id, user_id)
            await self.notification_repository.mark_read(notification_id)
            logfire.info("Notification marked read", notification_id=str(notification_id))

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark all of a user's notifications read.

        Returns:
            Number of notifications that changed
        """
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            updated = await self.notification_repository.mark_all_read(user_id)
            logfire.info("Notifications marked read", user_id=str(user_id), count=updated)
            return updated

    async def delete(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Delete a notification.

        Deleting a notification that doesn't exist is a no-op.

        Returns:
            True if a notification was deleted

        Raises:
            NotAuthorizedError: If it belongs to someone else
        """
        with logfire.span(
            "notification_service.delete", notification_id=str(notification_id)
        ):
            notification = await self.notification_repository.find_by_id(notification_id)
            if notification is None:
                logfire.info(
                    "Notification already gone", notification_id=str(notification_id)
                )
                return False
            self._check_owner(notification, user_id)
            return await self.notification_repository.delete(notification_id)

    async def _get_owned(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Notification", str(notification_id))
        self._check_owner(notification, user_id)
        return notification

    @staticmethod
    def _check_owner(notification: Notification, user_id: UserId) -> None:
        if notification.user_id != user_id:
            logfire.warn(
                "Notification access denied",
                notification_id=str(notification.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("notification", str(notification.id), str(user_id))
