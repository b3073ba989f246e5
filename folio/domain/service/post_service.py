"""Post domain service."""

import logfire

from folio.domain.error import NotFoundError
from folio.domain.model.post import Post
from folio.domain.repository import PostRepository
from folio.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_published_post(self, post_id: PostId) -> Post:
        """Get a post that readers are allowed to see.

        Args:
            post_id: Post ID

        Returns:
            The published post

        Raises:
            NotFoundError: If the post doesn't exist or is unpublished
        """
        post = await self.get_post_by_id(post_id)
        if post is None or not post.published:
            raise NotFoundError("Post", str(post_id))
        return post

    async def set_published(self, post_ids: list[PostId], published: bool) -> int:
        """Publish or unpublish posts in bulk.

        Args:
            post_ids: Posts to update
            published: New publication flag

        Returns:
            Number of posts updated
        """
        with logfire.span(
            "post_service.set_published", count=len(post_ids), published=published
        ):
            if not post_ids:
                return 0
            updated = await self.post_repository.set_published(post_ids, published)
            logfire.info("Publication updated", updated=updated, published=published)
            return updated
