"""Integration tests for the PostgreSQL repositories.

Require a migrated database at DATABASE__URL. Run with ``pytest -m integration``.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from folio.domain.model.like import Like
from folio.domain.repository import LikeRepository, PostRepository
from folio.domain.service import EngagementService
from folio.domain.value import LikeId, UserId
from tests.conftest import make_post
from tests.di import build_test_container
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


class TestPostgresLikeRepository:
    """Tests for like uniqueness in the database."""

    @pytest.mark.asyncio
    async def test_duplicate_like_rejected_and_session_still_usable(
        self, integration_env
    ):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        like_repo = await integration_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())
        await like_repo.save(Like(id=LikeId(uuid4()), post_id=post.id, user_id=user_id))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await like_repo.save(
                Like(id=LikeId(uuid4()), post_id=post.id, user_id=user_id)
            )
        assert await like_repo.count_by_post(post.id) == 1


class TestPostgresTextSearch:
    """Tests for full text search."""

    @pytest.mark.asyncio
    async def test_stemmed_match_on_title(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        marker = uuid4().hex[:8]
        post = await post_repo.save(
            make_post(f"Running benchmarks {marker}", tags=[marker])
        )

        # Act
        results = await post_repo.text_search("run benchmark")

        # Assert
        assert post.id in {p.id for p in results}

    @pytest.mark.asyncio
    async def test_view_count_increment(self, integration_env):
        engagement_service = await integration_env.get(EngagementService)
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post())

        await engagement_service.record_view(post.id, visit_id=str(uuid4()))

        assert (await post_repo.find_by_id(post.id)).view_count == 1


async def toggle_like_in_own_request(container, post_id, user_id):
    async with container() as request_container:
        engagement_service = await request_container.get(EngagementService)
        return await engagement_service.toggle_like(post_id, user_id)


class TestPostgresLikeToggleAcrossSessions:
    """Toggles from separate requests see each other's committed writes."""

    @pytest.mark.asyncio
    async def test_second_toggle_waits_for_first_commit_and_unlikes(self):
        # Arrange
        container = build_test_container(unmock={"persistence"})
        async with container() as setup:
            post_repo = await setup.get(PostRepository)
            post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        try:
            # Act
            async with container() as first_request:
                engagement_service = await first_request.get(EngagementService)
                first = await engagement_service.toggle_like(post.id, user_id)

                second_task = asyncio.create_task(
                    toggle_like_in_own_request(container, post.id, user_id)
                )
                await asyncio.sleep(0.3)
                blocked_until_commit = not second_task.done()

            second = await second_task

            # Assert
            assert first.liked is True
            assert blocked_until_commit
            assert second.liked is False
            assert second.like_count == 0
        finally:
            await container.close()
