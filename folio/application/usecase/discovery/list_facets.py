"""List facets use case."""

from pydantic import BaseModel

from folio.domain.service import FacetService
from folio.domain.value import DateRange


class CategoryFacetItem(BaseModel):
    """Category a reader can filter by."""

    category_id: str
    name: str
    slug: str
    color: str


class AuthorFacetItem(BaseModel):
    """Author a reader can filter by."""

    author_id: str
    name: str


class ListFacetsResponse(BaseModel):
    """All filter dimensions."""

    categories: list[CategoryFacetItem]
    tags: list[str]
    authors: list[AuthorFacetItem]
    date_ranges: list[DateRange]


class ListFacetsUseCase:
    """Use case for listing filter options."""

    def __init__(self, facet_service: FacetService) -> None:
        """Initialize list facets use case.

        Args:
            facet_service: Facet domain service
        """
        self.facet_service = facet_service

    async def execute(self) -> ListFacetsResponse:
        """Execute list facets flow.

        Returns:
            Categories, tags, authors and date ranges
        """
        facets = await self.facet_service.get_facets()
        return ListFacetsResponse(
            categories=[
                CategoryFacetItem(
                    category_id=str(c.id),
                    name=c.name,
                    slug=str(c.slug),
                    color=str(c.color),
                )
                for c in facets.categories
            ],
            tags=facets.tags,
            authors=[
                AuthorFacetItem(author_id=str(a.author_id), name=a.name)
                for a in facets.authors
            ],
            date_ranges=facets.date_ranges,
        )
