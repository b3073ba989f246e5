"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import EngagementService
from folio.domain.value import PostId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str  # UUID string
    user_id: str | None = None  # None when signed out


class ToggleLikeResponse(BaseModel):
    """Toggle like response with the authoritative like count."""

    liked: bool
    like_count: int


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a post."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize toggle like use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            New like state

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the post doesn't exist
            EngagementError: If the store failed
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        state = await self.engagement_service.toggle_like(
            PostId(UUID(request.post_id)), user_id
        )
        return ToggleLikeResponse(liked=state.liked, like_count=state.like_count)
