"""Reading list repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from folio.domain.model.reading_list import ReadingList
from folio.domain.value import PostId, ReadingListId, UserId


class ReadingListRepository(ABC):
    """Repository for reading lists and the posts on them.

    Lists are returned with ``post_ids`` filled in, oldest addition first.
    """

    @abstractmethod
    async def find_by_id(self, list_id: ReadingListId) -> Optional[ReadingList]:
        """Find a reading list by ID.

        Args:
            list_id: Reading list identifier

        Returns:
            The reading list if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[ReadingList]:
        """Find a user's reading lists, newest first."""
        pass

    @abstractmethod
    async def save(self, reading_list: ReadingList) -> ReadingList:
        """Save a reading list (create).

        The list's ``post_ids`` are not written; use ``add_post``.
        """
        pass

    @abstractmethod
    async def delete(self, list_id: ReadingListId) -> bool:
        """Delete a reading list and its entries.

        Returns:
            True if a list was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def add_post(self, list_id: ReadingListId, post_id: PostId) -> None:
        """Append a post to a list.

        Raises:
            IntegrityError: If the post is already on the list
        """
        pass

    @abstractmethod
    async def remove_post(self, list_id: ReadingListId, post_id: PostId) -> bool:
        """Take a post off a list.

        Returns:
            True if the post was on the list
        """
        pass
