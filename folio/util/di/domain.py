"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import AuthSettings, DiscoverySettings, EngagementSettings
from folio.domain.repository import (
    BookmarkRepository,
    CategoryRepository,
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
    ReadingListRepository,
)
from folio.domain.service import (
    AnalyticsService,
    BookmarkService,
    EngagementService,
    FacetService,
    JWTService,
    NotificationService,
    PostService,
    QueryNormalizer,
    ReadingListService,
    RelevanceRanker,
    SearchService,
)
from folio.util.di.base import ProviderBase
from folio.util.keyed import KeyedLocks, RecentKeys


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The visit registry and toggle locks are shared for the app's lifetime.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_recent_visits(self, settings: EngagementSettings) -> RecentKeys:
        """Provide the registry of recently counted visits."""
        return RecentKeys(
            ttl_seconds=settings.visit_ttl_seconds,
            max_entries=settings.visit_capacity,
        )

    @provide(scope=Scope.APP)
    def get_toggle_locks(self) -> KeyedLocks:
        """Provide per-(post, user) toggle locks."""
        return KeyedLocks()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_query_normalizer(self) -> QueryNormalizer:
        """Provide query normalizer."""
        return QueryNormalizer()

    @provide
    def get_relevance_ranker(self, settings: DiscoverySettings) -> RelevanceRanker:
        """Provide relevance ranker."""
        return RelevanceRanker(settings=settings)

    @provide
    def get_search_service(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
        relevance_ranker: RelevanceRanker,
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(
            post_repository=post_repository,
            category_repository=category_repository,
            relevance_ranker=relevance_ranker,
        )

    @provide
    def get_facet_service(
        self,
        category_repository: CategoryRepository,
        post_repository: PostRepository,
    ) -> FacetService:
        """Provide facet domain service."""
        return FacetService(
            category_repository=category_repository, post_repository=post_repository
        )

    @provide
    def get_engagement_service(
        self,
        post_repository: PostRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        recent_visits: RecentKeys,
        toggle_locks: KeyedLocks,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            post_repository=post_repository,
            like_repository=like_repository,
            comment_repository=comment_repository,
            recent_visits=recent_visits,
            toggle_locks=toggle_locks,
        )

    @provide
    def get_bookmark_service(
        self,
        bookmark_repository: BookmarkRepository,
        post_repository: PostRepository,
        toggle_locks: KeyedLocks,
    ) -> BookmarkService:
        """Provide bookmark domain service."""
        return BookmarkService(
            bookmark_repository=bookmark_repository,
            post_repository=post_repository,
            toggle_locks=toggle_locks,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_reading_list_service(
        self,
        reading_list_repository: ReadingListRepository,
        post_repository: PostRepository,
    ) -> ReadingListService:
        """Provide reading list domain service."""
        return ReadingListService(
            reading_list_repository=reading_list_repository,
            post_repository=post_repository,
        )

    @provide
    def get_analytics_service(
        self,
        post_repository: PostRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(
            post_repository=post_repository,
            like_repository=like_repository,
            comment_repository=comment_repository,
        )
