"""In-memory reading list repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from folio.domain.model.reading_list import ReadingList
from folio.domain.repository.reading_list import ReadingListRepository
from folio.domain.value import PostId, ReadingListId, UserId


class InMemoryReadingListRepository(ReadingListRepository):
    """In-memory implementation of ReadingListRepository for testing."""

    def __init__(self) -> None:
        self._lists: dict[ReadingListId, ReadingList] = {}

    async def find_by_id(self, list_id: ReadingListId) -> Optional[ReadingList]:
        """Find a reading list by ID."""
        return self._lists.get(list_id)

    async def find_by_user(self, user_id: UserId) -> list[ReadingList]:
        """Find a user's reading lists, newest first."""
        # Latest insert first so equal timestamps still read newest first
        mine = [rl for rl in reversed(self._lists.values()) if rl.user_id == user_id]
        mine.sort(key=lambda rl: rl.created_at, reverse=True)
        return mine

    async def save(self, reading_list: ReadingList) -> ReadingList:
        """Save a reading list without entries."""
        self._lists[reading_list.id] = reading_list.model_copy(update={"post_ids": []})
        return self._lists[reading_list.id]

    async def delete(self, list_id: ReadingListId) -> bool:
        """Delete a reading list."""
        return self._lists.pop(list_id, None) is not None

    async def add_post(self, list_id: ReadingListId, post_id: PostId) -> None:
        """Append a post to a list.

        Raises:
            IntegrityError: If the post is already on the list
        """
        reading_list = self._lists[list_id]
        if reading_list.contains(post_id):
            raise IntegrityError("Duplicate reading list entry", None, Exception())
        self._lists[list_id] = reading_list.model_copy(
            update={"post_ids": [*reading_list.post_ids, post_id]}
        )

    async def remove_post(self, list_id: ReadingListId, post_id: PostId) -> bool:
        """Take a post off a list."""
        reading_list = self._lists.get(list_id)
        if reading_list is None or not reading_list.contains(post_id):
            return False
        self._lists[list_id] = reading_list.model_copy(
            update={"post_ids": [pid for pid in reading_list.post_ids if pid != post_id]}
        )
        return True
