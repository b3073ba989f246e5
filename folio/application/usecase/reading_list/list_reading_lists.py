"""List reading lists use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.post.common import PostSummary
from folio.domain.model.reading_list import ReadingList
from folio.domain.service import ReadingListService
from folio.domain.value import UserId


class ReadingListItem(BaseModel):
    """A reading list as shown to its owner."""

    list_id: str
    name: str
    description: str
    is_public: bool
    created_at: datetime
    post_ids: list[str]  # Every post on the list, for "is this post saved?" checks
    posts: list[PostSummary]  # Published posts only

    @classmethod
    def from_list(
        cls, reading_list: ReadingList, posts: list[PostSummary] | None = None
    ) -> "ReadingListItem":
        return cls(
            list_id=str(reading_list.id),
            name=reading_list.name,
            description=reading_list.description,
            is_public=reading_list.is_public,
            created_at=reading_list.created_at,
            post_ids=[str(pid) for pid in reading_list.post_ids],
            posts=posts or [],
        )


class ListReadingListsRequest(BaseModel):
    """List reading lists request."""

    user_id: str | None = None


class ListReadingListsResponse(BaseModel):
    """A user's reading lists, newest first."""

    reading_lists: list[ReadingListItem]


class ListReadingListsUseCase:
    """Use case for showing a reader their lists."""

    def __init__(self, reading_list_service: ReadingListService) -> None:
        self.reading_list_service = reading_list_service

    async def execute(
        self, request: ListReadingListsRequest
    ) -> ListReadingListsResponse:
        """Execute list reading lists flow.

        Raises:
            NotAuthenticatedError: If no user is signed in
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        shelves = await self.reading_list_service.list_shelves(user_id)
        return ListReadingListsResponse(
            reading_lists=[
                ReadingListItem.from_list(
                    shelf.reading_list,
                    [PostSummary.from_post(post) for post in shelf.posts],
                )
                for shelf in shelves
            ]
        )
