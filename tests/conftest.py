"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from folio.domain.model.category import Category
from folio.domain.model.post import Post
from folio.domain.value import CategoryId, PostId, Slug, UserId

# Keep spans local and quiet while testing
logfire.configure(send_to_logfire=False, console=False)

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_post(
    title: str = "Test Post",
    tags: list[str] | None = None,
    days_old: float = 0,
    published: bool = True,
    **overrides,
) -> Post:
    """Helper function to build test posts.

    Args:
        title: Post title
        tags: Post tags
        days_old: Age relative to NOW
        published: Publication flag
        **overrides: Any other Post field

    Returns:
        Post
    """
    fields = {
        "id": PostId(uuid4()),
        "title": title,
        "content": f"{title} body text",
        "tags": tags or [],
        "author_id": UserId(uuid4()),
        "published": published,
        "created_at": NOW - timedelta(days=days_old),
        "updated_at": NOW - timedelta(days=days_old),
    }
    fields.update(overrides)
    return Post(**fields)


def make_category(name: str, slug: str) -> Category:
    """Helper function to build test categories."""
    return Category(id=CategoryId(uuid4()), name=name, slug=Slug(slug))
