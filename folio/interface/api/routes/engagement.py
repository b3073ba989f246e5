"""View, like and engagement counter routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from folio.application.usecase.engagement import (
    GetEngagementRequest,
    GetEngagementResponse,
    GetEngagementUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    ViewPostRequest,
    ViewPostResponse,
    ViewPostUseCase,
)
from folio.domain.error import DomainError
from folio.domain.service import JWTService
from folio.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["engagement"], route_class=DishkaRoute)


class ViewPostAPIRequest(BaseModel):
    """API request for recording a view."""

    visit_id: str | None = Field(default=None, max_length=128)


@router.post("/{post_id}/views", response_model=ViewPostResponse)
async def view_post(
    post_id: UUID,
    view_post_use_case: FromDishka[ViewPostUseCase],
    request: ViewPostAPIRequest | None = None,
) -> ViewPostResponse:
    """Record that a post was viewed.

    Repeated calls with the same ``visit_id`` count once. Never fails.

    Args:
        post_id: Post UUID
        view_post_use_case: View post use case from DI
        request: Optional body carrying the client's visit id

    Returns:
        Whether the view was counted
    """
    visit_id = request.visit_id if request else None
    return await view_post_use_case.execute(
        ViewPostRequest(post_id=str(post_id), visit_id=visit_id)
    )


@router.post("/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    post_id: UUID,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a post, or remove the like if already liked.

    Requires authentication.

    Args:
        post_id: Post UUID
        toggle_like_use_case: Toggle like use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        New like state and authoritative like count

    Raises:
        HTTPException: If not authenticated, post not found, or the store failed
    """
    identity = jwt_service.get_identity(auth_token)

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(
                post_id=str(post_id),
                user_id=identity.user_id if identity else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{post_id}/engagement", response_model=GetEngagementResponse)
async def get_engagement(
    post_id: UUID,
    get_engagement_use_case: FromDishka[GetEngagementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetEngagementResponse:
    """Get like, comment and view counts for a post.

    Args:
        post_id: Post UUID
        get_engagement_use_case: Get engagement use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Counters, plus whether the current user liked the post
    """
    identity = jwt_service.get_identity(auth_token)

    try:
        return await get_engagement_use_case.execute(
            GetEngagementRequest(
                post_id=str(post_id),
                user_id=identity.user_id if identity else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
