"""Bookmark domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from folio.domain.error import EngagementError, NotAuthenticatedError, NotFoundError
from folio.domain.model.bookmark import Bookmark
from folio.domain.model.post import Post
from folio.domain.repository import BookmarkRepository, PostRepository
from folio.domain.value import BookmarkId, PostId, UserId
from folio.util.keyed import KeyedLocks

from .base import Service


class BookmarkService(Service):
    """Domain service for a reader's saved posts."""

    def __init__(
        self,
        bookmark_repository: BookmarkRepository,
        post_repository: PostRepository,
        toggle_locks: KeyedLocks,
    ) -> None:
        self.bookmark_repository = bookmark_repository
        self.post_repository = post_repository
        self.toggle_locks = toggle_locks

    async def toggle_bookmark(self, post_id: PostId, user_id: UserId | None) -> bool:
        """Bookmark a post, or remove the bookmark if it exists.

        Args:
            post_id: Post ID
            user_id: Acting user (None when signed out)

        Returns:
            True if the post is now bookmarked

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the post doesn't exist or is unpublished
            EngagementError: If the store failed
        """
        if user_id is None:
            raise NotAuthenticatedError("bookmark posts")

        with logfire.span(
            "bookmark_service.toggle_bookmark",
            post_id=str(post_id),
            user_id=str(user_id),
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None or not post.published:
                raise NotFoundError("Post", str(post_id))

            async with self.toggle_locks.get(("bookmark", post_id, user_id)):
                try:
                    bookmarked = await self._flip(post_id, user_id)
                except Exception as e:
                    logfire.error(
                        "Bookmark toggle failed", post_id=str(post_id), error=str(e)
                    )
                    raise EngagementError("bookmark", str(post_id)) from e

            logfire.info(
                "Bookmark toggled", post_id=str(post_id), bookmarked=bookmarked
            )
            return bookmarked

    async def _flip(self, post_id: PostId, user_id: UserId) -> bool:
        await self.bookmark_repository.lock_pair(post_id, user_id)
        if await self.bookmark_repository.exists(post_id, user_id):
            await self.bookmark_repository.delete_by_post_and_user(post_id, user_id)
            return False

        bookmark = Bookmark(id=BookmarkId(uuid4()), post_id=post_id, user_id=user_id)
        try:
            await self.bookmark_repository.save(bookmark)
        except IntegrityError:
            logfire.warn("Duplicate bookmark reconciled", post_id=str(post_id))
        return True

    async def list_bookmarks(self, user_id: UserId | None) -> list[Post]:
        """Get a user's bookmarked posts, most recently bookmarked first.

        Unpublished posts are left out.

        Raises:
            NotAuthenticatedError: If no user is signed in
        """
        if user_id is None:
            raise NotAuthenticatedError("view bookmarks")

        with logfire.span("bookmark_service.list_bookmarks", user_id=str(user_id)):
            bookmarks = await self.bookmark_repository.find_by_user(user_id)
            posts = await self.post_repository.find_by_ids(
                [bookmark.post_id for bookmark in bookmarks]
            )
            by_id = {post.id: post for post in posts if post.published}
            result = [by_id[b.post_id] for b in bookmarks if b.post_id in by_id]
            logfire.info("Bookmarks retrieved", count=len(result))
            return result
