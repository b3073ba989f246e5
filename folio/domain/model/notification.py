"""Notification entity.

Notifications are raised by collaborators (comments, likes, follows) and
only read, marked and dismissed by their recipient here.
"""

from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, UtcDatetime, utcnow
from folio.domain.value import NotificationId, NotificationType, PostId, UserId


class Notification(DomainModel):
    """Notification entity."""

    id: NotificationId
    user_id: UserId  # Recipient
    type: NotificationType
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(default="", max_length=1000)
    is_read: bool = False
    related_post_id: Optional[PostId] = None
    related_user_id: Optional[UserId] = None
    created_at: UtcDatetime = Field(default_factory=utcnow)
