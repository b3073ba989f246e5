"""Relevance ranking for related content."""

from collections.abc import Iterable
from datetime import datetime

from folio.config import DiscoverySettings
from folio.domain.model.common import utcnow
from folio.domain.model.post import Post

from .base import Service


class RelevanceRanker(Service):
    """Scores candidate posts by shared tags and recency.

    score = tag_weight * |shared tags| + max(0, recency_window_days - days old)
    """

    def __init__(self, settings: DiscoverySettings) -> None:
        """Initialize the ranker.

        Args:
            settings: Discovery settings (weights, window, limit)
        """
        self.settings = settings

    def score(self, reference: Post, candidate: Post, now: datetime | None = None) -> int:
        """Score one candidate against a reference post.

        Args:
            reference: Post the reader is looking at
            candidate: Post being considered
            now: Reference time (defaults to current UTC time)

        Returns:
            Non-negative integer score
        """
        now = now or utcnow()
        shared = len(set(reference.tags) & set(candidate.tags))
        # timedelta.days is already floored; future posts count as brand new
        days_old = max(0, (now - candidate.created_at).days)
        recency = max(0, self.settings.recency_window_days - days_old)
        return self.settings.tag_weight * shared + recency

    def rank(
        self,
        reference: Post,
        candidates: Iterable[Post],
        now: datetime | None = None,
    ) -> list[Post]:
        """Order candidates by score, best first.

        The reference post and unpublished posts are excluded. Ties go to
        the newer post, then to the lower post id.

        Args:
            reference: Post the reader is looking at
            candidates: Posts to rank
            now: Reference time (defaults to current UTC time)

        Returns:
            All eligible candidates, ranked
        """
        now = now or utcnow()
        eligible = [
            post for post in candidates if post.published and post.id != reference.id
        ]
        scores = {post.id: self.score(reference, post, now) for post in eligible}

        eligible.sort(key=lambda post: str(post.id))
        eligible.sort(key=lambda post: (scores[post.id], post.created_at), reverse=True)
        return eligible

    def related(
        self,
        reference: Post,
        candidates: Iterable[Post],
        now: datetime | None = None,
        limit: int | None = None,
    ) -> list[Post]:
        """Top related posts for a reference post.

        Args:
            reference: Post the reader is looking at
            candidates: Candidate pool (bounded by the caller)
            now: Reference time (defaults to current UTC time)
            limit: Maximum results (defaults to the configured related limit)

        Returns:
            At most ``limit`` posts, ranked
        """
        limit = self.settings.related_limit if limit is None else limit
        return self.rank(reference, candidates, now)[:limit]
