"""Get engagement use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.domain.service import EngagementService
from folio.domain.value import PostId, UserId


class GetEngagementRequest(BaseModel):
    """Get engagement request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetEngagementResponse(BaseModel):
    """Post counters."""

    likes: int
    comments: int
    views: int
    liked: bool


class GetEngagementUseCase:
    """Use case for reading a post's engagement counters."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: GetEngagementRequest) -> GetEngagementResponse:
        """Execute get engagement flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None
        snapshot = await self.engagement_service.get_engagement(
            PostId(UUID(request.post_id)), user_id
        )
        return GetEngagementResponse(**snapshot.model_dump())
