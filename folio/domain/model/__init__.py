"""Domain model entities for Folio."""

from folio.domain.model.bookmark import Bookmark
from folio.domain.model.category import Category
from folio.domain.model.comment import Comment
from folio.domain.model.like import Like
from folio.domain.model.notification import Notification
from folio.domain.model.post import Post
from folio.domain.model.reading_list import ReadingList

__all__ = [
    "Post",
    "Category",
    "Comment",
    "Like",
    "Bookmark",
    "Notification",
    "ReadingList",
]
