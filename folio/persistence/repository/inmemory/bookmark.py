"""In-memory bookmark repository for testing."""

from sqlalchemy.exc import IntegrityError

from folio.domain.model.bookmark import Bookmark
from folio.domain.repository.bookmark import BookmarkRepository
from folio.domain.value import PostId, UserId


class InMemoryBookmarkRepository(BookmarkRepository):
    """In-memory implementation of BookmarkRepository for testing."""

    def __init__(self) -> None:
        self._bookmarks: list[Bookmark] = []

    async def lock_pair(self, post_id: PostId, user_id: UserId) -> None:
        """Writes are visible immediately, nothing to wait for."""

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has bookmarked a post."""
        return any(
            b.post_id == post_id and b.user_id == user_id for b in self._bookmarks
        )

    async def save(self, bookmark: Bookmark) -> Bookmark:
        """Save a bookmark.

        Raises:
            IntegrityError: If the post is already bookmarked by this user
        """
        if await self.exists(bookmark.post_id, bookmark.user_id):
            raise IntegrityError("Duplicate bookmark", None, Exception())

        self._bookmarks.append(bookmark)
        return bookmark

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a bookmark by post and user."""
        for i, b in enumerate(self._bookmarks):
            if b.post_id == post_id and b.user_id == user_id:
                self._bookmarks.pop(i)
                return True
        return False

    async def find_by_user(self, user_id: UserId) -> list[Bookmark]:
        """Find a user's bookmarks, newest first."""
        # Later inserts win ties so equal timestamps still come out newest first
        ordered = [b for b in self._bookmarks if b.user_id == user_id][::-1]
        return sorted(ordered, key=lambda b: b.created_at, reverse=True)
