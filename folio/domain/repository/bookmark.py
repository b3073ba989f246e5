"""Bookmark repository interface."""

from abc import ABC, abstractmethod
from typing import List

from folio.domain.model.bookmark import Bookmark
from folio.domain.value import PostId, UserId


class BookmarkRepository(ABC):
    """Repository for a user's bookmarked posts."""

    @abstractmethod
    async def lock_pair(self, post_id: PostId, user_id: UserId) -> None:
        """Hold off other toggles of this (post, user) until our writes commit."""
        pass

    @abstractmethod
    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has bookmarked a post."""
        pass

    @abstractmethod
    async def save(self, bookmark: Bookmark) -> Bookmark:
        """Save a bookmark (create).

        Raises:
            IntegrityError: If the (post, user) pair is already bookmarked
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a bookmark.

        Returns:
            True if a bookmark was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Bookmark]:
        """Find a user's bookmarks, newest first."""
        pass
