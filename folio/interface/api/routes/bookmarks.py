"""Bookmark routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from folio.application.usecase.bookmark import (
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
    ToggleBookmarkRequest,
    ToggleBookmarkResponse,
    ToggleBookmarkUseCase,
)
from folio.domain.error import DomainError
from folio.domain.service import JWTService
from folio.interface.error import to_http_exception

router = APIRouter(tags=["bookmarks"], route_class=DishkaRoute)


@router.post("/posts/{post_id}/bookmark", response_model=ToggleBookmarkResponse)
async def toggle_bookmark(
    post_id: UUID,
    toggle_bookmark_use_case: FromDishka[ToggleBookmarkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleBookmarkResponse:
    """Save a post to the reading list, or remove it.

    Requires authentication.

    Args:
        post_id: Post UUID
        toggle_bookmark_use_case: Toggle bookmark use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Whether the post is now bookmarked
    """
    identity = jwt_service.get_identity(auth_token)

    try:
        return await toggle_bookmark_use_case.execute(
            ToggleBookmarkRequest(
                post_id=str(post_id),
                user_id=identity.user_id if identity else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/bookmarks", response_model=ListBookmarksResponse)
async def list_bookmarks(
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListBookmarksResponse:
    """List the current user's bookmarked posts, most recently saved first."""
    identity = jwt_service.get_identity(auth_token)

    try:
        return await list_bookmarks_use_case.execute(
            ListBookmarksRequest(user_id=identity.user_id if identity else None)
        )
    except DomainError as e:
        raise to_http_exception(e)
