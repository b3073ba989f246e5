"""Toggle bookmark use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.domain.service import BookmarkService
from folio.domain.value import PostId, UserId


class ToggleBookmarkRequest(BaseModel):
    """Toggle bookmark request."""

    post_id: str  # UUID string
    user_id: str | None = None  # None when signed out


class ToggleBookmarkResponse(BaseModel):
    """Toggle bookmark response."""

    bookmarked: bool


class ToggleBookmarkUseCase:
    """Use case for saving a post to, or removing it from, the reading list."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        """Initialize toggle bookmark use case.

        Args:
            bookmark_service: Bookmark domain service
        """
        self.bookmark_service = bookmark_service

    async def execute(self, request: ToggleBookmarkRequest) -> ToggleBookmarkResponse:
        """Execute toggle bookmark flow.

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the post doesn't exist
            EngagementError: If the store failed
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        bookmarked = await self.bookmark_service.toggle_bookmark(
            PostId(UUID(request.post_id)), user_id
        )
        return ToggleBookmarkResponse(bookmarked=bookmarked)
