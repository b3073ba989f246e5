"""Domain services."""

from .analytics_service import AnalyticsService, PostStats, SiteAnalytics
from .base import Service
from .bookmark_service import BookmarkService
from .engagement_service import EngagementService
from .facet_service import AuthorFacet, Facets, FacetService
from .jwt_service import JWTService
from .notification_service import Inbox, NotificationService
from .post_service import PostService
from .query_normalizer import QueryNormalizer
from .reading_list_service import ReadingListService, Shelf
from .relevance_ranker import RelevanceRanker
from .search_service import SearchOutcome, SearchService

__all__ = [
    "AnalyticsService",
    "AuthorFacet",
    "BookmarkService",
    "EngagementService",
    "FacetService",
    "Facets",
    "Inbox",
    "JWTService",
    "NotificationService",
    "PostService",
    "PostStats",
    "QueryNormalizer",
    "ReadingListService",
    "RelevanceRanker",
    "SearchOutcome",
    "SearchService",
    "Service",
    "Shelf",
    "SiteAnalytics",
]
