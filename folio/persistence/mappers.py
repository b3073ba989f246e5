"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from folio.domain.model import (
    Bookmark,
    Category,
    Comment,
    Like,
    Notification,
    Post,
    ReadingList,
)
from folio.domain.value import (
    BookmarkId,
    CategoryId,
    HexColor,
    NotificationId,
    NotificationType,
    PostId,
    ReadingListId,
    Slug,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Accept UUIDs from asyncpg or strings from other drivers."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        excerpt=row.get("excerpt"),
        featured_image_url=row.get("featured_image_url"),
        tags=list(row.get("tags") or []),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row.get("author_name"),
        published=row["published"],
        is_featured=row.get("is_featured", False),
        view_count=row["view_count"],
        meta_title=row.get("meta_title"),
        meta_description=row.get("meta_description"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump()


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        color=HexColor(row["color"]),
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    return category.model_dump()


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_bookmark(row: Dict[str, Any]) -> Bookmark:
    """Convert database row to Bookmark domain model."""
    return Bookmark(
        id=BookmarkId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def bookmark_to_dict(bookmark: Bookmark) -> Dict[str, Any]:
    """Convert Bookmark domain model to database dict."""
    return bookmark.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    related_post_id = _optional_uuid(row.get("related_post_id"))
    related_user_id = _optional_uuid(row.get("related_user_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row.get("message") or "",
        is_read=row["is_read"],
        related_post_id=PostId(related_post_id) if related_post_id else None,
        related_user_id=UserId(related_user_id) if related_user_id else None,
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_reading_list(
    row: Dict[str, Any], post_ids: Optional[List[UUID]] = None
) -> ReadingList:
    """Convert database row to ReadingList domain model.

    Args:
        row: reading_lists row as dict
        post_ids: The list's post ids, oldest addition first

    Returns:
        ReadingList domain model
    """
    return ReadingList(
        id=ReadingListId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        name=row["name"],
        description=row.get("description") or "",
        is_public=row["is_public"],
        post_ids=[PostId(_uuid(pid)) for pid in post_ids or []],
        created_at=row["created_at"],
    )


def reading_list_to_dict(reading_list: ReadingList) -> Dict[str, Any]:
    """Convert ReadingList domain model to a reading_lists row."""
    return reading_list.model_dump(exclude={"post_ids"})
