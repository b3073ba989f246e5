"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .update_notifications import (
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationActionRequest,
)

__all__ = [
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadRequest",
    "MarkAllNotificationsReadResponse",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadUseCase",
    "NotificationActionRequest",
    "NotificationItem",
]
