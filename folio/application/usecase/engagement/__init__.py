"""Engagement use cases."""

from .get_engagement import (
    GetEngagementRequest,
    GetEngagementResponse,
    GetEngagementUseCase,
)
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase
from .view_post import ViewPostRequest, ViewPostResponse, ViewPostUseCase

__all__ = [
    "GetEngagementRequest",
    "GetEngagementResponse",
    "GetEngagementUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
    "ViewPostRequest",
    "ViewPostResponse",
    "ViewPostUseCase",
]
