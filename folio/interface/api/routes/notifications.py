"""Notification center routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from folio.application.usecase.notification import (
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationActionRequest,
)
from folio.domain.error import DomainError
from folio.domain.service import JWTService
from folio.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


def _require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    identity = jwt_service.get_identity(auth_token)
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to read notifications",
        )
    return identity.user_id


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=50, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's notifications, newest first.

    Requires authentication.

    Args:
        list_notifications_use_case: List notifications use case from DI
        jwt_service: JWT service for token verification (injected)
        limit: Maximum number of notifications to return
        auth_token: JWT token from cookie

    Returns:
        Notifications and the unread count
    """
    user_id = _require_user_id(jwt_service, auth_token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id, limit=limit)
    )


@router.post("/read-all", response_model=MarkAllNotificationsReadResponse)
async def mark_all_notifications_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllNotificationsReadResponse:
    """Mark every notification of the current user as read."""
    user_id = _require_user_id(jwt_service, auth_token)
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=user_id)
    )


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_notification_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Mark one notification as read.

    Args:
        notification_id: Notification UUID
        mark_read_use_case: Mark read use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Raises:
        HTTPException: If not authenticated, not found, or not the owner
    """
    user_id = _require_user_id(jwt_service, auth_token)

    try:
        await mark_read_use_case.execute(
            NotificationActionRequest(
                notification_id=str(notification_id), user_id=user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{notification_id}", response_model=DeleteNotificationResponse)
async def delete_notification(
    notification_id: UUID,
    delete_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteNotificationResponse:
    """Dismiss a notification. Deleting one that is already gone is a no-op.

    Args:
        notification_id: Notification UUID
        delete_use_case: Delete notification use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Whether a notification was deleted

    Raises:
        HTTPException: If not authenticated or not the owner
    """
    user_id = _require_user_id(jwt_service, auth_token)

    try:
        return await delete_use_case.execute(
            NotificationActionRequest(
                notification_id=str(notification_id), user_id=user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
