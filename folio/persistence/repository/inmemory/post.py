"""In-memory post repository for testing."""

from typing import Optional, Sequence

from folio.domain.model.post import Post
from folio.domain.repository.post import PostRepository
from folio.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Text search is a case-insensitive substring match over title,
    content, excerpt and tags.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts."""
        return [self._posts[pid] for pid in post_ids if pid in self._posts]

    async def find_published(self, limit: Optional[int] = None) -> list[Post]:
        """Find published posts, newest first."""
        posts = [p for p in self._posts.values() if p.published]
        posts.sort(key=lambda p: str(p.id))
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts if limit is None else posts[:limit]

    async def find_all(self) -> list[Post]:
        """Find every post."""
        return list(self._posts.values())

    async def text_search(self, query: str) -> list[Post]:
        """Substring search over published posts."""
        needle = query.lower()
        return [
            p
            for p in self._posts.values()
            if p.published
            and (
                needle in p.title.lower()
                or needle in p.content.lower()
                or needle in (p.excerpt or "").lower()
                or any(needle in tag.lower() for tag in p.tags)
            )
        ]

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def increment_view_count(self, post_id: PostId) -> bool:
        """Increment the view counter by 1."""
        post = self._posts.get(post_id)
        if post is None or not post.published:
            return False
        self._posts[post_id] = post.model_copy(
            update={"view_count": post.view_count + 1}
        )
        return True

    async def set_published(self, post_ids: Sequence[PostId], published: bool) -> int:
        """Publish or unpublish several posts."""
        updated = 0
        for post_id in set(post_ids):
            post = self._posts.get(post_id)
            if post:
                self._posts[post_id] = post.model_copy(update={"published": published})
                updated += 1
        return updated
