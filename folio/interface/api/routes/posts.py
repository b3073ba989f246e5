"""Post reading and discovery routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from folio.application.usecase.discovery import (
    GetRelatedPostsRequest,
    GetRelatedPostsResponse,
    GetRelatedPostsUseCase,
    ResolveDiscoveryResultsRequest,
    ResolveDiscoveryResultsResponse,
    ResolveDiscoveryResultsUseCase,
)
from folio.application.usecase.post import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
)
from folio.domain.error import DomainError
from folio.domain.value import DateRange
from folio.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=ResolveDiscoveryResultsResponse)
async def list_posts(
    resolve_use_case: FromDishka[ResolveDiscoveryResultsUseCase],
    text: str = "",
    author_id: UUID | None = None,
    category_id: UUID | None = None,
    tags: list[str] | None = Query(default=None),
    date_range: DateRange | None = None,
    related_to: UUID | None = None,
) -> ResolveDiscoveryResultsResponse:
    """Search and filter published posts.

    With no text and no facets this is the full published list, newest first.

    Args:
        resolve_use_case: Discovery use case from DI
        text: Free-text query
        author_id: Restrict to one author
        category_id: Restrict to one category
        tags: Every tag a post must carry (repeat the parameter for several)
        date_range: Restrict to posts created within this window
        related_to: Order results by relevance to this post

    Returns:
        Matching posts, with ``degraded`` set if search was unavailable

    Raises:
        HTTPException: If ``related_to`` names an unknown post
    """
    request = ResolveDiscoveryResultsRequest(
        text=text,
        author_id=str(author_id) if author_id else None,
        category_id=str(category_id) if category_id else None,
        tags=tags or [],
        date_range=date_range,
        related_to=str(related_to) if related_to else None,
    )

    try:
        return await resolve_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a published post by ID.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI

    Returns:
        Post details

    Raises:
        HTTPException: If post not found or unpublished
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    except DomainError as e:
        logfire.warn("Post not found", post_id=str(post_id))
        raise to_http_exception(e)


@router.get("/{post_id}/related", response_model=GetRelatedPostsResponse)
async def get_related_posts(
    post_id: UUID,
    get_related_posts_use_case: FromDishka[GetRelatedPostsUseCase],
) -> GetRelatedPostsResponse:
    """Get posts related to the one being read.

    Args:
        post_id: Post UUID
        get_related_posts_use_case: Related posts use case from DI

    Returns:
        Up to three related posts, best match first

    Raises:
        HTTPException: If post not found
    """
    try:
        return await get_related_posts_use_case.execute(
            GetRelatedPostsRequest(post_id=str(post_id))
        )
    except DomainError as e:
        raise to_http_exception(e)
