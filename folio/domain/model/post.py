"""Post aggregate root.

Posts are written by authors and become visible to discovery once published.
"""

import math
import re
from typing import Optional

from pydantic import Field, field_validator

from folio.domain.model.common import DomainModel, UtcDatetime, utcnow
from folio.domain.value import PostId, UserId

WORDS_PER_MINUTE = 225

_HTML_TAG = re.compile(r"<[^>]*>")


def reading_time_minutes(content: str) -> int:
    """Estimate reading time for a post body.

    HTML tags are stripped before counting whitespace-separated words.

    Args:
        content: Post body (plain text or HTML)

    Returns:
        Whole minutes at 225 words per minute, never less than 1
    """
    words = len(_HTML_TAG.sub("", content).split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


class Post(DomainModel):
    """Post aggregate root.

    Business rules:
    - Tags are free-form, case-sensitive strings kept in author order
    - Duplicate tags within one post are collapsed
    - view_count never decreases
    - The like count is not stored here, it is derived from Like rows
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: str
    excerpt: Optional[str] = None
    featured_image_url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    author_id: UserId
    author_name: Optional[str] = None  # Denormalized from profiles
    published: bool = False
    is_featured: bool = False
    view_count: int = Field(default=0, ge=0)
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    created_at: UtcDatetime = Field(default_factory=utcnow)
    updated_at: UtcDatetime = Field(default_factory=utcnow)

    @field_validator("tags")
    @classmethod
    def collapse_duplicate_tags(cls, tags: list[str]) -> list[str]:
        """Drop repeated tags while keeping first-seen order."""
        return list(dict.fromkeys(tags))

    @property
    def reading_time(self) -> int:
        """Estimated reading time in minutes."""
        return reading_time_minutes(self.content)
