"""Get analytics use case."""

from pydantic import BaseModel

from folio.domain.service import AnalyticsService


class TopPostItem(BaseModel):
    """One of the most viewed posts."""

    post_id: str
    title: str
    views: int
    likes: int
    comments: int


class GetAnalyticsResponse(BaseModel):
    """Site analytics response."""

    total_posts: int
    total_views: int
    total_likes: int
    total_comments: int
    top_posts: list[TopPostItem]


class GetAnalyticsUseCase:
    """Use case for the admin analytics dashboard.

    The caller must have checked that the requester is an admin.
    """

    def __init__(self, analytics_service: AnalyticsService) -> None:
        """Initialize get analytics use case.

        Args:
            analytics_service: Analytics domain service
        """
        self.analytics_service = analytics_service

    async def execute(self) -> GetAnalyticsResponse:
        """Execute analytics flow.

        Returns:
            Site totals and the five most viewed posts
        """
        analytics = await self.analytics_service.get_analytics()
        return GetAnalyticsResponse(
            total_posts=analytics.total_posts,
            total_views=analytics.total_views,
            total_likes=analytics.total_likes,
            total_comments=analytics.total_comments,
            top_posts=[
                TopPostItem(
                    post_id=str(stats.post.id),
                    title=stats.post.title,
                    views=stats.post.view_count,
                    likes=stats.likes,
                    comments=stats.comments,
                )
                for stats in analytics.top_posts
            ],
        )
