"""Discovery use cases."""

from .get_related_posts import (
    GetRelatedPostsRequest,
    GetRelatedPostsResponse,
    GetRelatedPostsUseCase,
)
from .list_facets import (
    AuthorFacetItem,
    CategoryFacetItem,
    ListFacetsResponse,
    ListFacetsUseCase,
)
from .resolve_discovery_results import (
    ResolveDiscoveryResultsRequest,
    ResolveDiscoveryResultsResponse,
    ResolveDiscoveryResultsUseCase,
)

__all__ = [
    "AuthorFacetItem",
    "CategoryFacetItem",
    "GetRelatedPostsRequest",
    "GetRelatedPostsResponse",
    "GetRelatedPostsUseCase",
    "ListFacetsResponse",
    "ListFacetsUseCase",
    "ResolveDiscoveryResultsRequest",
    "ResolveDiscoveryResultsResponse",
    "ResolveDiscoveryResultsUseCase",
]
