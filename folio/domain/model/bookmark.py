"""Bookmark entity for a user's reading list."""

from pydantic import Field

from folio.domain.model.common import DomainModel, UtcDatetime, utcnow
from folio.domain.value import BookmarkId, PostId, UserId


class Bookmark(DomainModel):
    """Bookmark entity, at most one per (post, user)."""

    id: BookmarkId
    post_id: PostId
    user_id: UserId
    created_at: UtcDatetime = Field(default_factory=utcnow)
