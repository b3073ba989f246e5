"""List bookmarks use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.post.common import PostSummary
from folio.domain.service import BookmarkService
from folio.domain.value import UserId


class ListBookmarksRequest(BaseModel):
    """List bookmarks request."""

    user_id: str | None = None


class ListBookmarksResponse(BaseModel):
    """A user's reading list."""

    posts: list[PostSummary]


class ListBookmarksUseCase:
    """Use case for listing a user's bookmarked posts."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: ListBookmarksRequest) -> ListBookmarksResponse:
        """Execute list bookmarks flow.

        Raises:
            NotAuthenticatedError: If no user is signed in
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        posts = await self.bookmark_service.list_bookmarks(user_id)
        return ListBookmarksResponse(posts=[PostSummary.from_post(p) for p in posts])
