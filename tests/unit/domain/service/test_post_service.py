"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from folio.domain.error import NotFoundError
from folio.domain.repository import PostRepository
from folio.domain.service import PostService
from folio.domain.value import PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPublishedPost:
    """Tests for get_published_post."""

    @pytest.mark.asyncio
    async def test_returns_published_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        assert await post_service.get_published_post(post.id) == post

    @pytest.mark.asyncio
    async def test_unpublished_post_is_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)
        draft = await post_service.save_post(make_post(published=False))

        with pytest.raises(NotFoundError):
            await post_service.get_published_post(draft.id)

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.get_published_post(PostId(uuid4()))


class TestSetPublished:
    """Tests for bulk publication."""

    @pytest.mark.asyncio
    async def test_unpublish_several(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        first = await post_repo.save(make_post())
        second = await post_repo.save(make_post())

        # Act
        updated = await post_service.set_published(
            [first.id, second.id, PostId(uuid4())], published=False
        )

        # Assert
        assert updated == 2
        assert await post_repo.find_published() == []

    @pytest.mark.asyncio
    async def test_empty_list_is_noop(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.set_published([], published=True) == 0


class TestReadingTime:
    """Tests for the reading time estimate."""

    def test_short_post_reads_in_one_minute(self):
        assert make_post(content="A few words").reading_time == 1

    def test_html_tags_are_not_counted(self):
        body = "<p>" + " ".join(["word"] * 450) + "</p>" + "<br/>" * 300

        assert make_post(content=body).reading_time == 2

    def test_partial_minutes_round_up(self):
        assert make_post(content=" ".join(["word"] * 226)).reading_time == 2
