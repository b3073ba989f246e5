"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.domain.service import PostService
from folio.domain.value import PostId

from .common import PostDetail


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostDetail


class GetPostUseCase:
    """Use case for retrieving a published post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            Post details

        Raises:
            NotFoundError: If the post doesn't exist or is unpublished
        """
        post = await self.post_service.get_published_post(PostId(UUID(request.post_id)))
        return GetPostResponse(post=PostDetail.from_post(post))
