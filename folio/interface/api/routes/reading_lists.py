"""Reading list routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from folio.application.usecase.reading_list import (
    AddPostToReadingListUseCase,
    CreateReadingListRequest,
    CreateReadingListUseCase,
    DeleteReadingListResponse,
    DeleteReadingListUseCase,
    ListReadingListsRequest,
    ListReadingListsResponse,
    ListReadingListsUseCase,
    ReadingListActionRequest,
    ReadingListEntryRequest,
    ReadingListItem,
    RemovePostFromReadingListResponse,
    RemovePostFromReadingListUseCase,
)
from folio.domain.error import DomainError
from folio.domain.service import JWTService
from folio.interface.error import to_http_exception

router = APIRouter(
    prefix="/reading-lists", tags=["reading-lists"], route_class=DishkaRoute
)


class CreateReadingListAPIRequest(BaseModel):
    """API request body for creating a reading list."""

    name: str = Field(max_length=100)
    description: str = ""
    is_public: bool = False


def _user_id(jwt_service: JWTService, auth_token: str | None) -> str | None:
    identity = jwt_service.get_identity(auth_token)
    return identity.user_id if identity else None


@router.get("", response_model=ListReadingListsResponse)
async def list_reading_lists(
    list_use_case: FromDishka[ListReadingListsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListReadingListsResponse:
    """List the current user's reading lists, newest first, with their posts."""
    try:
        return await list_use_case.execute(
            ListReadingListsRequest(user_id=_user_id(jwt_service, auth_token))
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "", response_model=ReadingListItem, status_code=status.HTTP_201_CREATED
)
async def create_reading_list(
    request: CreateReadingListAPIRequest,
    create_use_case: FromDishka[CreateReadingListUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReadingListItem:
    """Create an empty reading list.

    Requires authentication.

    Args:
        request: Name, description and visibility
        create_use_case: Create reading list use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The new list

    Raises:
        HTTPException: 401 when signed out, 400 for a blank name
    """
    try:
        return await create_use_case.execute(
            CreateReadingListRequest(
                user_id=_user_id(jwt_service, auth_token),
                name=request.name,
                description=request.description,
                is_public=request.is_public,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{list_id}", response_model=DeleteReadingListResponse)
async def delete_reading_list(
    list_id: UUID,
    delete_use_case: FromDishka[DeleteReadingListUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteReadingListResponse:
    """Delete a reading list. Deleting one that is already gone is a no-op."""
    try:
        return await delete_use_case.execute(
            ReadingListActionRequest(
                list_id=str(list_id), user_id=_user_id(jwt_service, auth_token)
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{list_id}/posts/{post_id}", response_model=ReadingListItem)
async def add_post_to_reading_list(
    list_id: UUID,
    post_id: UUID,
    add_use_case: FromDishka[AddPostToReadingListUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReadingListItem:
    """Put a post on a reading list. Repeating the call changes nothing.

    Raises:
        HTTPException: 401 when signed out, 403 for someone else's list,
            404 for a missing list or post
    """
    try:
        return await add_use_case.execute(
            ReadingListEntryRequest(
                list_id=str(list_id),
                post_id=str(post_id),
                user_id=_user_id(jwt_service, auth_token),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete(
    "/{list_id}/posts/{post_id}", response_model=RemovePostFromReadingListResponse
)
async def remove_post_from_reading_list(
    list_id: UUID,
    post_id: UUID,
    remove_use_case: FromDishka[RemovePostFromReadingListUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemovePostFromReadingListResponse:
    """Take a post off a reading list."""
    try:
        return await remove_use_case.execute(
            ReadingListEntryRequest(
                list_id=str(list_id),
                post_id=str(post_id),
                user_id=_user_id(jwt_service, auth_token),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
