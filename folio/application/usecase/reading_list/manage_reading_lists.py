"""Use cases for creating, deleting and filling reading lists."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.reading_list.list_reading_lists import ReadingListItem
from folio.domain.service import ReadingListService
from folio.domain.value import PostId, ReadingListId, UserId


def _user_id(value: str | None) -> UserId | None:
    return UserId(UUID(value)) if value else None


class CreateReadingListRequest(BaseModel):
    """Create reading list request."""

    user_id: str | None = None
    name: str
    description: str = ""
    is_public: bool = False


class ReadingListActionRequest(BaseModel):
    """Request acting on one reading list."""

    list_id: str  # UUID string
    user_id: str | None = None


class ReadingListEntryRequest(ReadingListActionRequest):
    """Request adding or removing one post."""

    post_id: str  # UUID string


class DeleteReadingListResponse(BaseModel):
    """Delete reading list response."""

    deleted: bool


class RemovePostFromReadingListResponse(BaseModel):
    """Remove post response."""

    removed: bool


class CreateReadingListUseCase:
    """Use case for starting a new reading list."""

    def __init__(self, reading_list_service: ReadingListService) -> None:
        self.reading_list_service = reading_list_service

    async def execute(self, request: CreateReadingListRequest) -> ReadingListItem:
        """Execute create flow.

        Raises:
            NotAuthenticatedError: If no user is signed in
            ValidationError: If the name is blank or too long
        """
        reading_list = await self.reading_list_service.create_list(
            _user_id(request.user_id),
            request.name,
            description=request.description,
            is_public=request.is_public,
        )
        return ReadingListItem.from_list(reading_list)


class DeleteReadingListUseCase:
    """Use case for deleting a reading list."""

    def __init__(self, reading_list_service: ReadingListService) -> None:
        self.reading_list_service = reading_list_service

    async def execute(
        self, request: ReadingListActionRequest
    ) -> DeleteReadingListResponse:
        """Execute delete flow. Deleting a missing list is a no-op.

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotAuthorizedError: If the list belongs to someone else
        """
        deleted = await self.reading_list_service.delete_list(
            ReadingListId(UUID(request.list_id)), _user_id(request.user_id)
        )
        return DeleteReadingListResponse(deleted=deleted)


class AddPostToReadingListUseCase:
    """Use case for saving a post to a reading list."""

    def __init__(self, reading_list_service: ReadingListService) -> None:
        self.reading_list_service = reading_list_service

    async def execute(self, request: ReadingListEntryRequest) -> ReadingListItem:
        """Execute add flow.

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the list or a published post doesn't exist
            NotAuthorizedError: If the list belongs to someone else
        """
        reading_list = await self.reading_list_service.add_post(
            ReadingListId(UUID(request.list_id)),
            PostId(UUID(request.post_id)),
            _user_id(request.user_id),
        )
        return ReadingListItem.from_list(reading_list)


class RemovePostFromReadingListUseCase:
    """Use case for taking a post off a reading list."""

    def __init__(self, reading_list_service: ReadingListService) -> None:
        self.reading_list_service = reading_list_service

    async def execute(
        self, request: ReadingListEntryRequest
    ) -> RemovePostFromReadingListResponse:
        """Execute remove flow.

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the list doesn't exist
            NotAuthorizedError: If the list belongs to someone else
        """
        removed = await self.reading_list_service.remove_post(
            ReadingListId(UUID(request.list_id)),
            PostId(UUID(request.post_id)),
            _user_id(request.user_id),
        )
        return RemovePostFromReadingListResponse(removed=removed)
