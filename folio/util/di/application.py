"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.admin import GetAnalyticsUseCase, SetPublicationUseCase
from folio.application.usecase.bookmark import (
    ListBookmarksUseCase,
    ToggleBookmarkUseCase,
)
from folio.application.usecase.discovery import (
    GetRelatedPostsUseCase,
    ListFacetsUseCase,
    ResolveDiscoveryResultsUseCase,
)
from folio.application.usecase.engagement import (
    GetEngagementUseCase,
    ToggleLikeUseCase,
    ViewPostUseCase,
)
from folio.application.usecase.notification import (
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from folio.application.usecase.post import GetPostUseCase
from folio.application.usecase.reading_list import (
    AddPostToReadingListUseCase,
    CreateReadingListUseCase,
    DeleteReadingListUseCase,
    ListReadingListsUseCase,
    RemovePostFromReadingListUseCase,
)
from folio.domain.service import (
    AnalyticsService,
    BookmarkService,
    EngagementService,
    FacetService,
    NotificationService,
    PostService,
    QueryNormalizer,
    ReadingListService,
    SearchService,
)
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Discovery use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_discovery_results_use_case(
        self,
        query_normalizer: QueryNormalizer,
        search_service: SearchService,
        post_service: PostService,
    ) -> ResolveDiscoveryResultsUseCase:
        """Provide resolve discovery results use case."""
        return ResolveDiscoveryResultsUseCase(
            query_normalizer=query_normalizer,
            search_service=search_service,
            post_service=post_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_related_posts_use_case(
        self, post_service: PostService, search_service: SearchService
    ) -> GetRelatedPostsUseCase:
        """Provide get related posts use case."""
        return GetRelatedPostsUseCase(
            post_service=post_service, search_service=search_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_facets_use_case(self, facet_service: FacetService) -> ListFacetsUseCase:
        """Provide list facets use case."""
        return ListFacetsUseCase(facet_service=facet_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_view_post_use_case(
        self, engagement_service: EngagementService
    ) -> ViewPostUseCase:
        """Provide view post use case."""
        return ViewPostUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, engagement_service: EngagementService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_get_engagement_use_case(
        self, engagement_service: EngagementService
    ) -> GetEngagementUseCase:
        """Provide get engagement use case."""
        return GetEngagementUseCase(engagement_service=engagement_service)

    # Bookmark use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_bookmark_use_case(
        self, bookmark_service: BookmarkService
    ) -> ToggleBookmarkUseCase:
        """Provide toggle bookmark use case."""
        return ToggleBookmarkUseCase(bookmark_service=bookmark_service)

    @provide(scope=Scope.REQUEST)
    def get_list_bookmarks_use_case(
        self, bookmark_service: BookmarkService
    ) -> ListBookmarksUseCase:
        """Provide list bookmarks use case."""
        return ListBookmarksUseCase(bookmark_service=bookmark_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    # Reading list use cases
    @provide(scope=Scope.REQUEST)
    def get_list_reading_lists_use_case(
        self, reading_list_service: ReadingListService
    ) -> ListReadingListsUseCase:
        """Provide list reading lists use case."""
        return ListReadingListsUseCase(reading_list_service=reading_list_service)

    @provide(scope=Scope.REQUEST)
    def get_create_reading_list_use_case(
        self, reading_list_service: ReadingListService
    ) -> CreateReadingListUseCase:
        """Provide create reading list use case."""
        return CreateReadingListUseCase(reading_list_service=reading_list_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_reading_list_use_case(
        self, reading_list_service: ReadingListService
    ) -> DeleteReadingListUseCase:
        """Provide delete reading list use case."""
        return DeleteReadingListUseCase(reading_list_service=reading_list_service)

    @provide(scope=Scope.REQUEST)
    def get_add_post_to_reading_list_use_case(
        self, reading_list_service: ReadingListService
    ) -> AddPostToReadingListUseCase:
        """Provide add post to reading list use case."""
        return AddPostToReadingListUseCase(reading_list_service=reading_list_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_post_from_reading_list_use_case(
        self, reading_list_service: ReadingListService
    ) -> RemovePostFromReadingListUseCase:
        """Provide remove post from reading list use case."""
        return RemovePostFromReadingListUseCase(
            reading_list_service=reading_list_service
        )

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_get_analytics_use_case(
        self, analytics_service: AnalyticsService
    ) -> GetAnalyticsUseCase:
        """Provide analytics use case."""
        return GetAnalyticsUseCase(analytics_service=analytics_service)

    @provide(scope=Scope.REQUEST)
    def get_set_publication_use_case(
        self, post_service: PostService
    ) -> SetPublicationUseCase:
        """Provide bulk publication use case."""
        return SetPublicationUseCase(post_service=post_service)
