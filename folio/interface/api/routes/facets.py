"""Facet routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from folio.application.usecase.discovery import ListFacetsResponse, ListFacetsUseCase

router = APIRouter(tags=["discovery"], route_class=DishkaRoute)


@router.get("/facets", response_model=ListFacetsResponse)
async def list_facets(
    list_facets_use_case: FromDishka[ListFacetsUseCase],
) -> ListFacetsResponse:
    """List every filter dimension the discovery page offers.

    Args:
        list_facets_use_case: List facets use case from DI

    Returns:
        Categories, tags, authors and date ranges
    """
    return await list_facets_use_case.execute()
