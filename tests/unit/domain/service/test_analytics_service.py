"""Unit tests for AnalyticsService."""

from uuid import uuid4

import pytest

from folio.domain.model.comment import Comment
from folio.domain.repository import CommentRepository, PostRepository
from folio.domain.service import AnalyticsService, EngagementService
from folio.domain.value import CommentId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetAnalytics:
    """Tests for site analytics."""

    @pytest.mark.asyncio
    async def test_totals_and_top_posts(self, unit_env):
        # Arrange
        analytics_service = await unit_env.get(AnalyticsService)
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        posts = [
            await post_repo.save(make_post(f"p{views}", view_count=views))
            for views in (3, 50, 7, 0, 21, 9)
        ]
        draft = await post_repo.save(make_post("draft", published=False, view_count=1))
        popular = posts[1]
        await engagement_service.toggle_like(popular.id, UserId(uuid4()))
        await engagement_service.toggle_like(popular.id, UserId(uuid4()))
        await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=popular.id,
                author_id=UserId(uuid4()),
                content="Great read",
            )
        )

        # Act
        analytics = await analytics_service.get_analytics()

        # Assert
        assert analytics.total_posts == 7
        assert analytics.total_views == 91
        assert analytics.total_likes == 2
        assert analytics.total_comments == 1
        assert [s.post.title for s in analytics.top_posts] == [
            "p50",
            "p21",
            "p9",
            "p7",
            "p3",
        ]
        assert analytics.top_posts[0].likes == 2
        assert analytics.top_posts[0].comments == 1
        assert draft.id not in [s.post.id for s in analytics.top_posts]

    @pytest.mark.asyncio
    async def test_empty_site(self, unit_env):
        analytics_service = await unit_env.get(AnalyticsService)

        analytics = await analytics_service.get_analytics()

        assert analytics.total_posts == 0
        assert analytics.top_posts == []
