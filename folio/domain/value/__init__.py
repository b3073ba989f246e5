"""Domain value objects for Folio."""

from folio.domain.value.identifiers import (
    BookmarkId,
    CategoryId,
    CommentId,
    LikeId,
    NotificationId,
    PostId,
    ReadingListId,
    UserId,
)
from folio.domain.value.engagement import EngagementSnapshot, LikeState
from folio.domain.value.filter import FilterPredicate
from folio.domain.value.types import (
    DateRange,
    HexColor,
    NotificationType,
    Slug,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CategoryId",
    "CommentId",
    "LikeId",
    "BookmarkId",
    "NotificationId",
    "ReadingListId",
    # Value objects
    "EngagementSnapshot",
    "FilterPredicate",
    "LikeState",
    # Types
    "DateRange",
    "HexColor",
    "NotificationType",
    "Slug",
    "UserRole",
]
