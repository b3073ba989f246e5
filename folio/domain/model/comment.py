"""Comment entity.

Comments are owned by the comments collaborator; discovery only counts them.
"""

from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel, UtcDatetime, utcnow
from folio.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: UtcDatetime = Field(default_factory=utcnow)
