"""Admin use cases."""

from .get_analytics import GetAnalyticsResponse, GetAnalyticsUseCase, TopPostItem
from .set_publication import (
    SetPublicationRequest,
    SetPublicationResponse,
    SetPublicationUseCase,
)

__all__ = [
    "GetAnalyticsResponse",
    "GetAnalyticsUseCase",
    "SetPublicationRequest",
    "SetPublicationResponse",
    "SetPublicationUseCase",
    "TopPostItem",
]
