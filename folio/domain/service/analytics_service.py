"""Site analytics for administrators."""

from dataclasses import dataclass, field

import logfire

from folio.domain.model.post import Post
from folio.domain.repository import CommentRepository, LikeRepository, PostRepository

from .base import Service

TOP_POSTS_LIMIT = 5


@dataclass(frozen=True)
class PostStats:
    """Engagement counters for one post."""

    post: Post
    likes: int
    comments: int


@dataclass(frozen=True)
class SiteAnalytics:
    """Totals across the whole site plus the most viewed posts."""

    total_posts: int = 0
    total_views: int = 0
    total_likes: int = 0
    total_comments: int = 0
    top_posts: list[PostStats] = field(default_factory=list)


class AnalyticsService(Service):
    """Computes site-wide engagement totals.

    Callers are responsible for checking that the requester is an admin.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize analytics service.

        Args:
            post_repository: Post repository
            like_repository: Like repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.like_repository = like_repository
        self.comment_repository = comment_repository

    async def get_analytics(self, top: int = TOP_POSTS_LIMIT) -> SiteAnalytics:
        """Compute site totals and the most viewed posts.

        Args:
            top: Number of most viewed posts to include

        Returns:
            Site analytics
        """
        with logfire.span("analytics_service.get_analytics", top=top):
            posts = await self.post_repository.find_all()
            total_likes = await self.like_repository.count_all()
            total_comments = await self.comment_repository.count_all()

            ranked = sorted(posts, key=lambda post: str(post.id))
            ranked.sort(key=lambda post: post.view_count, reverse=True)

            top_posts = []
            for post in ranked[:top]:
                top_posts.append(
                    PostStats(
                        post=post,
                        likes=await self.like_repository.count_by_post(post.id),
                        comments=await self.comment_repository.count_by_post(post.id),
                    )
                )

            analytics = SiteAnalytics(
                total_posts=len(posts),
                total_views=sum(post.view_count for post in posts),
                total_likes=total_likes,
                total_comments=total_comments,
                top_posts=top_posts,
            )
            logfire.info(
                "Analytics computed",
                total_posts=analytics.total_posts,
                total_views=analytics.total_views,
            )
            return analytics
