"""Search resolver for content discovery."""

from dataclasses import dataclass, field
from datetime import datetime

import logfire

from folio.domain.model.post import Post
from folio.domain.repository import CategoryRepository, PostRepository
from folio.domain.value import FilterPredicate, PostId

from .base import Service
from .relevance_ranker import RelevanceRanker


@dataclass(frozen=True)
class SearchOutcome:
    """Result of resolving a predicate.

    ``degraded`` is set when a collaborator failed and the posts list is
    smaller than it should be (usually empty).
    """

    posts: list[Post] = field(default_factory=list)
    degraded: bool = False


def newest_first(posts: list[Post]) -> list[Post]:
    """Sort posts by creation time descending, ties by post id ascending."""
    ordered = sorted(posts, key=lambda post: str(post.id))
    ordered.sort(key=lambda post: post.created_at, reverse=True)
    return ordered


class SearchService(Service):
    """Resolves a FilterPredicate against the post store."""

    def __init__(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
        relevance_ranker: RelevanceRanker,
    ) -> None:
        """Initialize search service.

        Args:
            post_repository: Post repository
            category_repository: Category repository
            relevance_ranker: Ranker used when a reference post is given
        """
        self.post_repository = post_repository
        self.category_repository = category_repository
        self.relevance_ranker = relevance_ranker

    async def search(
        self,
        predicate: FilterPredicate,
        reference: Post | None = None,
        now: datetime | None = None,
    ) -> SearchOutcome:
        """Resolve a predicate to an ordered list of published posts.

        Collaborator failures never raise; they produce an empty,
        degraded outcome instead.

        Args:
            predicate: Normalized filter predicate
            reference: When given, order results by relevance to this post
            now: Reference time for relevance scoring

        Returns:
            Search outcome
        """
        with logfire.span(
            "search_service.search",
            text=predicate.text,
            author_id=str(predicate.author_id) if predicate.author_id else None,
            category_id=str(predicate.category_id) if predicate.category_id else None,
            tags=list(predicate.tags),
        ):
            candidates = await self._fetch_candidates(predicate)
            if candidates is None:
                return SearchOutcome(posts=[], degraded=True)

            category_post_ids: set[PostId] | None = None
            if predicate.category_id is not None:
                try:
                    category_post_ids = (
                        await self.category_repository.find_post_ids_by_category(
                            predicate.category_id
                        )
                    )
                except Exception as e:
                    logfire.error(
                        "Category lookup failed, returning degraded results",
                        category_id=str(predicate.category_id),
                        error=str(e),
                    )
                    return SearchOutcome(posts=[], degraded=True)

            matched = [
                post
                for post in candidates
                if post.published and predicate.matches(post, category_post_ids)
            ]
            ordered = newest_first(matched)

            if reference is not None:
                ordered = self.relevance_ranker.rank(reference, ordered, now)

            logfire.info(
                "Search resolved",
                candidates=len(candidates),
                results=len(ordered),
            )
            return SearchOutcome(posts=ordered)

    async def _fetch_candidates(self, predicate: FilterPredicate) -> list[Post] | None:
        """Fetch the starting set, or None if the store failed."""
        if predicate.text is not None:
            try:
                return await self.post_repository.text_search(predicate.text)
            except Exception as e:
                logfire.error(
                    "Text search failed, returning degraded results",
                    text=predicate.text,
                    error=str(e),
                )
                return None

        try:
            return await self.post_repository.find_published()
        except Exception as e:
            logfire.error("Published post fetch failed", error=str(e))
            return None

    async def related_to(
        self, reference: Post, now: datetime | None = None
    ) -> SearchOutcome:
        """Find posts related to a reference post.

        The newest published posts (up to the configured pool size) are
        ranked by shared tags and recency and the best few are returned.

        Args:
            reference: Post the reader is looking at
            now: Reference time for scoring

        Returns:
            Search outcome with at most the configured number of posts
        """
        settings = self.relevance_ranker.settings
        with logfire.span(
            "search_service.related_to",
            post_id=str(reference.id),
            pool_size=settings.related_pool_size,
        ):
            try:
                # One extra in case the reference itself is among the newest
                posts = await self.post_repository.find_published(
                    limit=settings.related_pool_size + 1
                )
            except Exception as e:
                logfire.error(
                    "Related post fetch failed",
                    post_id=str(reference.id),
                    error=str(e),
                )
                return SearchOutcome(posts=[], degraded=True)

            pool = [post for post in posts if post.id != reference.id]
            pool = pool[: settings.related_pool_size]
            related = self.relevance_ranker.related(reference, pool, now)
            logfire.info("Related posts ranked", pool=len(pool), results=len(related))
            return SearchOutcome(posts=related)
