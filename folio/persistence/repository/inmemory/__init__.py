"""In-memory repository implementations for testing."""

from .bookmark import InMemoryBookmarkRepository
from .category import InMemoryCategoryRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .reading_list import InMemoryReadingListRepository

__all__ = [
    "InMemoryBookmarkRepository",
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryReadingListRepository",
]
