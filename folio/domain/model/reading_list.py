"""Reading list entity."""

from pydantic import Field

from folio.domain.model.common import DomainModel, UtcDatetime, utcnow
from folio.domain.value import PostId, ReadingListId, UserId


class ReadingList(DomainModel):
    """A reader's named collection of posts.

    ``post_ids`` is ordered by when each post was added and never holds
    the same post twice.
    """

    id: ReadingListId
    user_id: UserId  # Owner
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    is_public: bool = False
    post_ids: list[PostId] = Field(default_factory=list)
    created_at: UtcDatetime = Field(default_factory=utcnow)

    def contains(self, post_id: PostId) -> bool:
        return post_id in self.post_ids
