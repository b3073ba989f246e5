"""Unit tests for FacetService."""

from uuid import uuid4

import pytest

from folio.domain.repository import CategoryRepository, PostRepository
from folio.domain.service import FacetService
from folio.domain.value import DateRange, UserId
from folio.persistence.repository.inmemory import (
    InMemoryCategoryRepository,
    InMemoryPostRepository,
)
from tests.conftest import make_category, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class BrokenPostRepository(InMemoryPostRepository):
    async def find_published(self, limit=None):
        raise ConnectionError("database unavailable")


class TestGetFacets:
    """Tests for the facet bundle."""

    @pytest.mark.asyncio
    async def test_facets_come_from_published_posts(self, unit_env):
        # Arrange
        facet_service = await unit_env.get(FacetService)
        post_repo = await unit_env.get(PostRepository)
        category_repo = await unit_env.get(CategoryRepository)
        await category_repo.save(make_category("Web", "web"))
        await category_repo.save(make_category("Data", "data"))
        ada = UserId(uuid4())
        for post in (
            make_post(tags=["rust", "go"], author_id=ada, author_name="Ada"),
            make_post(tags=["Rust"], author_name="Bob"),
            make_post(tags=["secret"], author_name="Eve", published=False),
            make_post(tags=["go"], author_id=ada, author_name="Ada"),
        ):
            await post_repo.save(post)

        # Act
        facets = await facet_service.get_facets()

        # Assert
        assert [c.name for c in facets.categories] == ["Data", "Web"]
        assert facets.tags == ["Rust", "go", "rust"]
        assert [a.name for a in facets.authors] == ["Ada", "Bob"]
        assert facets.date_ranges == [DateRange.WEEK, DateRange.MONTH, DateRange.YEAR]

    @pytest.mark.asyncio
    async def test_authors_without_names_are_skipped(self, unit_env):
        facet_service = await unit_env.get(FacetService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(author_name=None))

        facets = await facet_service.get_facets()

        assert facets.authors == []

    @pytest.mark.asyncio
    async def test_post_store_failure_leaves_tag_and_author_facets_empty(self):
        # Arrange
        category_repo = InMemoryCategoryRepository()
        await category_repo.save(make_category("Web", "web"))
        facet_service = FacetService(
            category_repository=category_repo,
            post_repository=BrokenPostRepository(),
        )

        # Act
        facets = await facet_service.get_facets()

        # Assert
        assert [c.name for c in facets.categories] == ["Web"]
        assert facets.tags == []
        assert facets.authors == []
