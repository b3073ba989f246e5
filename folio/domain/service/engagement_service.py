"""Engagement ledger: view counting and likes."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from folio.domain.error import EngagementError, NotAuthenticatedError, NotFoundError
from folio.domain.model.like import Like
from folio.domain.repository import CommentRepository, LikeRepository, PostRepository
from folio.domain.value import EngagementSnapshot, LikeId, LikeState, PostId, UserId
from folio.util.keyed import KeyedLocks, RecentKeys

from .base import Service


class EngagementService(Service):
    """Domain service keeping view and like counters consistent.

    Counters are never cached here. The only in-process state is the
    registry of recent visits and the per-(post, user) toggle locks, both
    shared across requests.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        recent_visits: RecentKeys,
        toggle_locks: KeyedLocks,
    ) -> None:
        """Initialize engagement service.

        Args:
            post_repository: Post repository
            like_repository: Like repository
            comment_repository: Comment repository
            recent_visits: Registry of (post, visit) pairs already counted
            toggle_locks: Locks serializing toggles per (post, user)
        """
        self.post_repository = post_repository
        self.like_repository = like_repository
        self.comment_repository = comment_repository
        self.recent_visits = recent_visits
        self.toggle_locks = toggle_locks

    async def record_view(self, post_id: PostId, visit_id: str | None = None) -> bool:
        """Count a view of a post, at most once per visit.

        Failures are logged and dropped; viewing a post never fails. Missing
        and unpublished posts are not counted.

        Args:
            post_id: Post ID
            visit_id: Client-supplied visit identifier (None counts every call)

        Returns:
            True if the counter was incremented
        """
        with logfire.span(
            "engagement_service.record_view", post_id=str(post_id), visit_id=visit_id
        ):
            key = (post_id, visit_id)
            if visit_id is not None and not self.recent_visits.add(key):
                logfire.debug("View already counted for visit", post_id=str(post_id))
                return False

            try:
                counted = await self.post_repository.increment_view_count(post_id)
            except Exception as e:
                logfire.error(
                    "Failed to record view", post_id=str(post_id), error=str(e)
                )
                counted = False
            else:
                if not counted:
                    logfire.warn("View of unknown post", post_id=str(post_id))

            if not counted:
                if visit_id is not None:
                    self.recent_visits.discard(key)
                return False

            logfire.info("View recorded", post_id=str(post_id))
            return True

    async def toggle_like(self, post_id: PostId, user_id: UserId | None) -> LikeState:
        """Like a post if the user hasn't, otherwise unlike it.

        Args:
            post_id: Post ID
            user_id: Acting user (None when signed out)

        Returns:
            The user's like state with the like count re-read from the store

        Raises:
            NotAuthenticatedError: If no user is signed in
            NotFoundError: If the post doesn't exist or is unpublished
            EngagementError: If the store failed; the toggle may not have applied
        """
        if user_id is None:
            raise NotAuthenticatedError("like posts")

        with logfire.span(
            "engagement_service.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None or not post.published:
                logfire.warn("Like on unavailable post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            lock = self.toggle_locks.get(("like", post_id, user_id))
            async with lock:
                try:
                    liked = await self._flip_like(post_id, user_id)
                    like_count = await self.like_repository.count_by_post(post_id)
                except Exception as e:
                    logfire.error(
                        "Like toggle failed",
                        post_id=str(post_id),
                        user_id=str(user_id),
                        error=str(e),
                    )
                    raise EngagementError("like", str(post_id)) from e

            logfire.info(
                "Like toggled",
                post_id=str(post_id),
                liked=liked,
                like_count=like_count,
            )
            return LikeState(liked=liked, like_count=like_count)

    async def _flip_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Apply one toggle and return the resulting liked flag."""
        await self.like_repository.lock_pair(post_id, user_id)
        if await self.like_repository.exists(post_id, user_id):
            deleted = await self.like_repository.delete_by_post_and_user(post_id, user_id)
            if not deleted:
                logfire.info("Like was already removed", post_id=str(post_id))
            return False

        like = Like(id=LikeId(uuid4()), post_id=post_id, user_id=user_id)
        try:
            await self.like_repository.save(like)
        except IntegrityError:
            # Another request liked first; the row exists either way
            logfire.warn(
                "Duplicate like reconciled", post_id=str(post_id), user_id=str(user_id)
            )
        return True

    async def get_engagement(
        self, post_id: PostId, user_id: UserId | None = None
    ) -> EngagementSnapshot:
        """Read a post's counters from the store.

        Args:
            post_id: Post ID
            user_id: Viewer, used to fill in ``liked`` (optional)

        Returns:
            Engagement snapshot

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("engagement_service.get_engagement", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", str(post_id))

            likes = await self.like_repository.count_by_post(post_id)
            comments = await self.comment_repository.count_by_post(post_id)
            liked = False
            if user_id is not None:
                liked = await self.like_repository.exists(post_id, user_id)

            return EngagementSnapshot(
                likes=likes, comments=comments, views=post.view_count, liked=liked
            )
