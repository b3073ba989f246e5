"""Resolve discovery results use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.post.common import PostSummary
from folio.domain.service import PostService, QueryNormalizer, SearchService
from folio.domain.value import CategoryId, DateRange, PostId, UserId


class ResolveDiscoveryResultsRequest(BaseModel):
    """Search text plus the facets the reader selected."""

    text: str = ""
    author_id: str | None = None  # UUID string
    category_id: str | None = None  # UUID string
    tags: list[str] = Field(default_factory=list)
    date_range: DateRange | None = None
    related_to: str | None = None  # Order by relevance to this post


class ResolveDiscoveryResultsResponse(BaseModel):
    """Discovery results."""

    posts: list[PostSummary]
    total: int
    degraded: bool = False  # True when search was unavailable


class ResolveDiscoveryResultsUseCase(BaseUseCase):
    """Use case turning a reader's query and facets into a result list."""

    def __init__(
        self,
        query_normalizer: QueryNormalizer,
        search_service: SearchService,
        post_service: PostService,
    ) -> None:
        """Initialize use case.

        Args:
            query_normalizer: Builds the filter predicate
            search_service: Resolves the predicate
            post_service: Looks up the reference post for relevance ordering
        """
        self.query_normalizer = query_normalizer
        self.search_service = search_service
        self.post_service = post_service

    async def execute(
        self, request: ResolveDiscoveryResultsRequest
    ) -> ResolveDiscoveryResultsResponse:
        """Execute discovery flow.

        Args:
            request: Query and facet selection

        Returns:
            Matching published posts, newest first unless ``related_to`` is set

        Raises:
            NotFoundError: If ``related_to`` names an unknown post
        """
        predicate = self.query_normalizer.normalize(
            text=request.text,
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
            category_id=(
                CategoryId(UUID(request.category_id)) if request.category_id else None
            ),
            tags=request.tags,
            date_range=request.date_range,
        )

        reference = None
        if request.related_to:
            reference = await self.post_service.get_published_post(
                PostId(UUID(request.related_to))
            )

        outcome = await self.search_service.search(predicate, reference=reference)

        return ResolveDiscoveryResultsResponse(
            posts=[PostSummary.from_post(post) for post in outcome.posts],
            total=len(outcome.posts),
            degraded=outcome.degraded,
        )
