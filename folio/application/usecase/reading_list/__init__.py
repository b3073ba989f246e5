"""Reading list use cases."""

from .list_reading_lists import (
    ListReadingListsRequest,
    ListReadingListsResponse,
    ListReadingListsUseCase,
    ReadingListItem,
)
from .manage_reading_lists import (
    AddPostToReadingListUseCase,
    CreateReadingListRequest,
    CreateReadingListUseCase,
    DeleteReadingListResponse,
    DeleteReadingListUseCase,
    ReadingListActionRequest,
    ReadingListEntryRequest,
    RemovePostFromReadingListResponse,
    RemovePostFromReadingListUseCase,
)

__all__ = [
    "AddPostToReadingListUseCase",
    "CreateReadingListRequest",
    "CreateReadingListUseCase",
    "DeleteReadingListResponse",
    "DeleteReadingListUseCase",
    "ListReadingListsRequest",
    "ListReadingListsResponse",
    "ListReadingListsUseCase",
    "ReadingListActionRequest",
    "ReadingListEntryRequest",
    "ReadingListItem",
    "RemovePostFromReadingListResponse",
    "RemovePostFromReadingListUseCase",
]
