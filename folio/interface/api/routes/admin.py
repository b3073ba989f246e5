"""Admin routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from folio.application.usecase.admin import (
    GetAnalyticsResponse,
    GetAnalyticsUseCase,
    SetPublicationRequest,
    SetPublicationResponse,
    SetPublicationUseCase,
)
from folio.domain.service import JWTService

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


def _require_admin(jwt_service: JWTService, auth_token: str | None) -> str:
    """Check the caller is a signed-in admin.

    Returns:
        The admin's user ID

    Raises:
        HTTPException: 401 if not signed in, 403 if not an admin
    """
    identity = jwt_service.get_identity(auth_token)
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    if not identity.is_admin:
        logfire.warn("Non-admin attempted admin action", user_id=identity.user_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return identity.user_id


@router.get("/analytics", response_model=GetAnalyticsResponse)
async def get_analytics(
    get_analytics_use_case: FromDishka[GetAnalyticsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetAnalyticsResponse:
    """Site totals and the most viewed posts.

    Requires the admin role.
    """
    _require_admin(jwt_service, auth_token)
    return await get_analytics_use_case.execute()


@router.post("/posts/publication", response_model=SetPublicationResponse)
async def set_publication(
    request: SetPublicationRequest,
    set_publication_use_case: FromDishka[SetPublicationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SetPublicationResponse:
    """Publish or unpublish posts in bulk.

    Requires the admin role.

    Args:
        request: Post IDs and the new publication flag
        set_publication_use_case: Set publication use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Number of posts updated

    Raises:
        HTTPException: If not an admin or a post ID is malformed
    """
    admin_id = _require_admin(jwt_service, auth_token)

    try:
        result = await set_publication_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    logfire.info(
        "Publication changed by admin",
        admin_id=admin_id,
        published=request.published,
        updated=result.updated,
    )
    return result
