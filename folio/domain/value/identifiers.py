"""Strongly typed identifiers for Folio domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CategoryId = NewType("CategoryId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
BookmarkId = NewType("BookmarkId", UUID)
NotificationId = NewType("NotificationId", UUID)
ReadingListId = NewType("ReadingListId", UUID)
