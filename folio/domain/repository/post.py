"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from folio.domain.model.post import Post
from folio.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID (published or not).

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts in a single query.

        Args:
            post_ids: Post IDs to look up

        Returns:
            Posts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_published(self, limit: Optional[int] = None) -> List[Post]:
        """Find published posts, newest first.

        Args:
            limit: Maximum number of posts to return (None for all)

        Returns:
            Published posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find every post regardless of publication state.

        Returns:
            All posts
        """
        pass

    @abstractmethod
    async def text_search(self, query: str) -> List[Post]:
        """Full-text search over published posts.

        Relevance ordering is engine-defined; callers must not rely on it.

        Args:
            query: Non-empty search text

        Returns:
            Matching published posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> bool:
        """Atomically increment the view counter by 1.

        Uses SQL-level increment to avoid race conditions.

        Args:
            post_id: The post ID

        Returns:
            True if the post exists, is published and its counter changed
        """
        pass

    @abstractmethod
    async def set_published(self, post_ids: Sequence[PostId], published: bool) -> int:
        """Publish or unpublish several posts.

        Args:
            post_ids: Posts to update
            published: New publication flag

        Returns:
            Number of posts updated
        """
        pass
