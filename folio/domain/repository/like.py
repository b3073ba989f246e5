"""Like repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.like import Like
from folio.domain.value import PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def lock_pair(self, post_id: PostId, user_id: UserId) -> None:
        """Hold off other toggles of this (post, user) until our writes commit.

        Args:
            post_id: The post's ID
            user_id: The user's ID
        """
        pass

    @abstractmethod
    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has liked a post.

        Args:
            post_id: The post's ID
            user_id: The user's ID

        Returns:
            True if a like row exists for the pair
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If a like already exists for this (post, user)
        """
        pass

    @abstractmethod
    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like on a post.

        Args:
            post_id: The post's ID
            user_id: The user's ID

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post.

        Args:
            post_id: The post's ID

        Returns:
            Number of likes
        """
        pass

    @abstractmethod
    async def count_all(self) -> int:
        """Count likes across all posts.

        Returns:
            Total number of likes
        """
        pass
