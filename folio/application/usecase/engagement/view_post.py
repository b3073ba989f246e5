"""View post use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import EngagementService
from folio.domain.value import PostId


class ViewPostRequest(BaseModel):
    """View post request."""

    post_id: str  # UUID string
    visit_id: str | None = None  # Same id on re-render means same visit


class ViewPostResponse(BaseModel):
    """View post response."""

    counted: bool


class ViewPostUseCase(BaseUseCase):
    """Use case for counting a post view."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize view post use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: ViewPostRequest) -> ViewPostResponse:
        """Execute view post flow. Never fails.

        Args:
            request: View post request

        Returns:
            Whether the view was counted
        """
        counted = await self.engagement_service.record_view(
            PostId(UUID(request.post_id)), visit_id=request.visit_id
        )
        return ViewPostResponse(counted=counted)
