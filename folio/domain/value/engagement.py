"""Engagement value objects.

Counters shown to readers are always derived from the store. A client may
patch them optimistically, but the patch is replaced by the next
authoritative read and never persisted.
"""

from pydantic import Field

from folio.domain.value.common import ValueObject


class LikeState(ValueObject):
    """Whether a user likes a post, and how many likes it has."""

    liked: bool
    like_count: int = Field(ge=0)

    def optimistic_toggle(self) -> "LikeState":
        """State to show immediately after a click, before the store answers."""
        if self.liked:
            return LikeState(liked=False, like_count=max(0, self.like_count - 1))
        return LikeState(liked=True, like_count=self.like_count + 1)

    def reconcile(self, authoritative: "LikeState") -> "LikeState":
        """Replace a local (possibly optimistic) state with the store's answer."""
        return authoritative


class EngagementSnapshot(ValueObject):
    """Counters for one post as read from the store."""

    likes: int = Field(ge=0)
    comments: int = Field(ge=0)
    views: int = Field(ge=0)
    liked: bool = False
