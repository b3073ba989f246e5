"""Use cases for marking and deleting notifications."""

from uuid import UUID

from pydantic import BaseModel

from folio.domain.service import NotificationService
from folio.domain.value import NotificationId, UserId


class NotificationActionRequest(BaseModel):
    """Request acting on one notification."""

    notification_id: str  # UUID string
    user_id: str  # Authenticated user


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    user_id: str


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated: int


class DeleteNotificationResponse(BaseModel):
    """Delete notification response."""

    deleted: bool


class MarkNotificationReadUseCase:
    """Use case for marking one notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationActionRequest) -> None:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification doesn't exist
            NotAuthorizedError: If it belongs to someone else
        """
        await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)), UserId(UUID(request.user_id))
        )


class MarkAllNotificationsReadUseCase:
    """Use case for clearing the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        """Execute mark all read flow."""
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllNotificationsReadResponse(updated=updated)


class DeleteNotificationUseCase:
    """Use case for dismissing a notification."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: NotificationActionRequest
    ) -> DeleteNotificationResponse:
        """Execute delete flow. Deleting a missing notification is a no-op.

        Raises:
            NotAuthorizedError: If it belongs to someone else
        """
        deleted = await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)), UserId(UUID(request.user_id))
        )
        return DeleteNotificationResponse(deleted=deleted)
