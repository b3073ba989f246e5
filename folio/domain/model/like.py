"""Like entity.

A like is a (post, user) pair. Each user can like a post at most once;
the store enforces this with a unique constraint.
"""

from pydantic import Field

from folio.domain.model.common import DomainModel, UtcDatetime, utcnow
from folio.domain.value import LikeId, PostId, UserId


class Like(DomainModel):
    """Like entity.

    Created and destroyed by the engagement ledger's toggle, never updated.
    """

    id: LikeId
    post_id: PostId
    user_id: UserId
    created_at: UtcDatetime = Field(default_factory=utcnow)
