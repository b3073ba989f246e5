"""Comment repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.comment import Comment
from folio.domain.value import PostId


class CommentRepository(ABC):
    """Repository for comments, used here only for counting."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post.

        Args:
            post_id: The post's ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def count_all(self) -> int:
        """Count comments across all posts.

        Returns:
            Total number of comments
        """
        pass
