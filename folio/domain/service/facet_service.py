"""Facet store: the filter dimensions a reader can pick from."""

from collections.abc import Iterable
from dataclasses import dataclass, field

import logfire

from folio.domain.model.category import Category
from folio.domain.model.post import Post
from folio.domain.repository import CategoryRepository, PostRepository
from folio.domain.value import DateRange, UserId

from .base import Service


@dataclass(frozen=True)
class AuthorFacet:
    """An author who has at least one published post."""

    author_id: UserId
    name: str


@dataclass(frozen=True)
class Facets:
    """All filter dimensions bundled for one round trip."""

    categories: list[Category] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    authors: list[AuthorFacet] = field(default_factory=list)
    date_ranges: list[DateRange] = field(default_factory=list)


class FacetService(Service):
    """Domain service exposing enumerable filter dimensions."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize facet service.

        Args:
            category_repository: Category repository
            post_repository: Post repository
        """
        self.category_repository = category_repository
        self.post_repository = post_repository

    async def list_categories(self) -> list[Category]:
        """Get all categories ordered by name.

        Returns:
            List of categories (empty if the store is unavailable)
        """
        with logfire.span("facet_service.list_categories"):
            try:
                categories = await self.category_repository.find_all()
            except Exception as e:
                logfire.warn("Category facet unavailable", error=str(e))
                return []

            categories = sorted(categories, key=lambda c: c.name)
            logfire.info("Categories retrieved", count=len(categories))
            return categories

    @staticmethod
    def list_tags(posts: Iterable[Post]) -> list[str]:
        """Union of tags across posts, sorted."""
        return sorted({tag for post in posts for tag in post.tags})

    @staticmethod
    def list_authors(posts: Iterable[Post]) -> list[AuthorFacet]:
        """Distinct named authors across posts, ordered by name."""
        authors: dict[UserId, str] = {}
        for post in posts:
            if post.author_name and post.author_id not in authors:
                authors[post.author_id] = post.author_name
        return sorted(
            (AuthorFacet(author_id=a, name=n) for a, n in authors.items()),
            key=lambda facet: (facet.name, str(facet.author_id)),
        )

    @staticmethod
    def date_ranges() -> list[DateRange]:
        """Available date buckets."""
        return list(DateRange)

    async def get_facets(self) -> Facets:
        """Get every facet in one call.

        Returns:
            Facets bundle; tag and author facets are empty if published
            posts could not be fetched
        """
        with logfire.span("facet_service.get_facets"):
            categories = await self.list_categories()

            try:
                posts = await self.post_repository.find_published()
            except Exception as e:
                logfire.warn("Tag and author facets unavailable", error=str(e))
                posts = []

            published = [post for post in posts if post.published]
            facets = Facets(
                categories=categories,
                tags=self.list_tags(published),
                authors=self.list_authors(published),
                date_ranges=self.date_ranges(),
            )
            logfire.info(
                "Facets built",
                categories=len(facets.categories),
                tags=len(facets.tags),
                authors=len(facets.authors),
            )
            return facets
