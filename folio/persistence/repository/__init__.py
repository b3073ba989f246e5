"""PostgreSQL repository implementations."""

from folio.persistence.repository.bookmark import PostgresBookmarkRepository
from folio.persistence.repository.category import PostgresCategoryRepository
from folio.persistence.repository.comment import PostgresCommentRepository
from folio.persistence.repository.like import PostgresLikeRepository
from folio.persistence.repository.notification import PostgresNotificationRepository
from folio.persistence.repository.post import PostgresPostRepository
from folio.persistence.repository.reading_list import PostgresReadingListRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCategoryRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresBookmarkRepository",
    "PostgresNotificationRepository",
    "PostgresReadingListRepository",
]
