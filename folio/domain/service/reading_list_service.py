"""Reading list domain service."""

from dataclasses import dataclass, field
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from folio.domain.error import (
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from folio.domain.model.post import Post
from folio.domain.model.reading_list import ReadingList
from folio.domain.repository import PostRepository, ReadingListRepository
from folio.domain.value import PostId, ReadingListId, UserId

from .base import Service

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class Shelf:
    """A reading list together with its published posts, in list order."""

    reading_list: ReadingList
    posts: list[Post] = field(default_factory=list)


class ReadingListService(Service):
    """Domain service for a reader's named reading lists.

    Only the owner of a list may change it. Posts hidden from discovery stay
    on a list but are left out when it is read back.
    """

    def __init__(
        self,
        reading_list_repository: ReadingListRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize reading list service.

        Args:
            reading_list_repository: Reading list repository
            post_repository: Post repository
        """
        self.reading_list_repository = reading_list_repository
        self.post_repository = post_repository

    async def create_list(
        self,
        user_id: UserId | None,
        name: str,
        description: str = "",
        is_public: bool = False,
    ) -> ReadingList:
        """Create an empty reading list.

        Args:
            user_id: Owner (None when signed out)
            name: List name, surrounding whitespace ignored
            description: Optional description
            is_public: Whether other readers may see the list

        Returns:
            The created list

        Raises:
            NotAuthenticatedError: If no user is signed in
            ValidationError: If the name is blank or too long
        """
        if user_id is None:
            raise NotAuthenticatedError("create reading lists")

        name = name.strip()
        if not name:
            raise ValidationError("Reading list name is required")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Reading list name must be at most {MAX_NAME_LENGTH} characters"
            )

        with logfire.span("reading_list_service.create_list", user_id=str(user_id)):
            reading_list = ReadingList(
                id=ReadingListId(uuid4()),
                user_id=user_id,
                name=name,
                description=description.strip(),
                is_public=is_public,
            )
            saved = await self.reading_list_repository.save(reading_list)
            logfire.info("Reading list created", list_id=str(saved.id))
            return saved

    async def delete_list(self, list_id: ReadingListId, user_id: UserId | None) -> bool:
        """Delete a reading list. Deleting a list that doesn't exist is a no-op.

        Returns:
            True if a list was deleted

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotAuthorizedError: If the list belongs to someone else
        """
        if user_id is None:
            raise NotAuthenticatedError("delete reading lists")

        with logfire.span("reading_list_service.delete_list", list_id=str(list_id)):
            reading_list = await self.reading_list_repository.find_by_id(list_id)
            if reading_list is None:
                logfire.info("Reading list already gone", list_id=str(list_id))
                return False
            self._check_owner(reading_list, user_id)
            return await self.reading_list_repository.delete(list_id)

    async def add_post(
        self, list_id: ReadingListId, post_id: PostId, user_id: UserId | None
    ) -> ReadingList:
        """Put a published post on a list. Adding it twice changes nothing.

        Returns:
            The list as stored afterwards

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the list or post doesn't exist, or the post is unpublished
            NotAuthorizedError: If the list belongs to someone else
        """
        if user_id is None:
            raise NotAuthenticatedError("edit reading lists")

        with logfire.span(
            "reading_list_service.add_post", list_id=str(list_id), post_id=str(post_id)
        ):
            reading_list = await self._get_owned(list_id, user_id)
            post = await self.post_repository.find_by_id(post_id)
            if post is None or not post.published:
                raise NotFoundError("Post", str(post_id))

            if reading_list.contains(post_id):
                return reading_list

            try:
                await self.reading_list_repository.add_post(list_id, post_id)
            except IntegrityError:
                logfire.warn("Duplicate list entry reconciled", post_id=str(post_id))

            logfire.info("Post added to reading list", list_id=str(list_id))
            return await self._get_owned(list_id, user_id)

    async def remove_post(
        self, list_id: ReadingListId, post_id: PostId, user_id: UserId | None
    ) -> bool:
        """Take a post off a list.

        Returns:
            True if the post was on the list

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the list doesn't exist
            NotAuthorizedError: If the list belongs to someone else
        """
        if user_id is None:
            raise NotAuthenticatedError("edit reading lists")

        with logfire.span(
            "reading_list_service.remove_post",
            list_id=str(list_id),
            post_id=str(post_id),
        ):
            await self._get_owned(list_id, user_id)
            removed = await self.reading_list_repository.remove_post(list_id, post_id)
            logfire.info("Post removed from reading list", removed=removed)
            return removed

    async def list_shelves(self, user_id: UserId | None) -> list[Shelf]:
        """Get a user's reading lists, newest first, with their published posts.

        Raises:
            NotAuthenticatedError: If no user is signed in
        """
        if user_id is None:
            raise NotAuthenticatedError("view reading lists")

        with logfire.span("reading_list_service.list_shelves", user_id=str(user_id)):
            reading_lists = await self.reading_list_repository.find_by_user(user_id)
            wanted = {pid for rl in reading_lists for pid in rl.post_ids}
            posts = await self.post_repository.find_by_ids(list(wanted))
            by_id = {post.id: post for post in posts if post.published}

            shelves = [
                Shelf(
                    reading_list=rl,
                    posts=[by_id[pid] for pid in rl.post_ids if pid in by_id],
                )
                for rl in reading_lists
            ]
            logfire.info("Reading lists retrieved", count=len(shelves))
            return shelves

    async def _get_owned(self, list_id: ReadingListId, user_id: UserId) -> ReadingList:
        reading_list = await self.reading_list_repository.find_by_id(list_id)
        if reading_list is None:
            raise NotFoundError("Reading list", str(list_id))
        self._check_owner(reading_list, user_id)
        return reading_list

    @staticmethod
    def _check_owner(reading_list: ReadingList, user_id: UserId) -> None:
        if reading_list.user_id != user_id:
            logfire.warn(
                "Reading list access denied",
                list_id=str(reading_list.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("reading list", str(reading_list.id), str(user_id))
