"""In-memory comment repository for testing."""

from folio.domain.model.comment import Comment
from folio.domain.repository.comment import CommentRepository
from folio.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def count_all(self) -> int:
        """Count all comments."""
        return len(self._comments)
