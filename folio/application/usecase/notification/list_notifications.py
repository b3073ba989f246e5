"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from folio.domain.model.notification import Notification
from folio.domain.service import NotificationService
from folio.domain.value import NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification as shown in the notification center."""

    notification_id: str
    type: NotificationType
    title: str
    message: str
    is_read: bool
    related_post_id: str | None
    related_user_id: str | None
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            notification_id=str(notification.id),
            type=notification.type,
            title=notification.title,
            message=notification.message,
            is_read=notification.is_read,
            related_post_id=(
                str(notification.related_post_id)
                if notification.related_post_id
                else None
            ),
            related_user_id=(
                str(notification.related_user_id)
                if notification.related_user_id
                else None
            ),
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Authenticated user
    limit: int = Field(default=50, ge=1, le=100)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading the notification center."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Args:
            request: List notifications request

        Returns:
            Latest notifications and unread count
        """
        inbox = await self.notification_service.list_notifications(
            UserId(UUID(request.user_id)), limit=request.limit
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationItem.from_notification(n) for n in inbox.notifications
            ],
            unread_count=inbox.unread_count,
        )
