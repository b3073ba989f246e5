"""Repository interfaces for Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from folio.domain.repository.bookmark import BookmarkRepository
from folio.domain.repository.category import CategoryRepository
from folio.domain.repository.comment import CommentRepository
from folio.domain.repository.like import LikeRepository
from folio.domain.repository.notification import NotificationRepository
from folio.domain.repository.post import PostRepository
from folio.domain.repository.reading_list import ReadingListRepository

__all__ = [
    "PostRepository",
    "CategoryRepository",
    "CommentRepository",
    "LikeRepository",
    "BookmarkRepository",
    "NotificationRepository",
    "ReadingListRepository",
]
