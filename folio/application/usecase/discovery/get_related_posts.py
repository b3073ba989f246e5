"""Get related posts use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.post.common import PostSummary
from folio.domain.service import PostService, SearchService
from folio.domain.value import PostId


class GetRelatedPostsRequest(BaseModel):
    """Get related posts request."""

    post_id: str  # UUID string


class GetRelatedPostsResponse(BaseModel):
    """Get related posts response."""

    posts: list[PostSummary]
    degraded: bool = False


class GetRelatedPostsUseCase(BaseUseCase):
    """Use case for "you might also like" posts."""

    def __init__(self, post_service: PostService, search_service: SearchService) -> None:
        """Initialize get related posts use case.

        Args:
            post_service: Post domain service
            search_service: Search domain service
        """
        self.post_service = post_service
        self.search_service = search_service

    async def execute(self, request: GetRelatedPostsRequest) -> GetRelatedPostsResponse:
        """Execute related posts flow.

        Args:
            request: Request naming the post being read

        Returns:
            Up to three related posts, best match first

        Raises:
            NotFoundError: If the post doesn't exist or is unpublished
        """
        reference = await self.post_service.get_published_post(
            PostId(UUID(request.post_id))
        )
        outcome = await self.search_service.related_to(reference)
        return GetRelatedPostsResponse(
            posts=[PostSummary.from_post(post) for post in outcome.posts],
            degraded=outcome.degraded,
        )
