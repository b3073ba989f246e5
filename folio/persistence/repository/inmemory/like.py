"""In-memory like repository for testing."""

from sqlalchemy.exc import IntegrityError

from folio.domain.model.like import Like
from folio.domain.repository.like import LikeRepository
from folio.domain.value import PostId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def lock_pair(self, post_id: PostId, user_id: UserId) -> None:
        """Writes are visible immediately, nothing to wait for."""

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has liked a post."""
        return any(
            like.post_id == post_id and like.user_id == user_id for like in self._likes
        )

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the user already liked this post
        """
        if await self.exists(like.post_id, like.user_id):
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a like by post and user."""
        for i, like in enumerate(self._likes):
            if like.post_id == post_id and like.user_id == user_id:
                self._likes.pop(i)
                return True
        return False

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for like in self._likes if like.post_id == post_id)

    async def count_all(self) -> int:
        """Count all likes."""
        return len(self._likes)
