"""Unit tests for EngagementService."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from folio.domain.error import EngagementError, NotAuthenticatedError, NotFoundError
from folio.domain.model.comment import Comment
from folio.domain.model.like import Like
from folio.domain.repository import CommentRepository, LikeRepository, PostRepository
from folio.domain.service import EngagementService
from folio.domain.value import CommentId, LikeId, PostId, UserId
from folio.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
)
from folio.util.keyed import KeyedLocks, RecentKeys
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class RecordingPostRepository(InMemoryPostRepository):
    """Post store that records every call."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    async def find_by_id(self, post_id):
        self.calls.append("find_by_id")
        return await super().find_by_id(post_id)


class RacingLikeRepository(InMemoryLikeRepository):
    """Like store where another request inserts between the check and the save."""

    async def save(self, like: Like) -> Like:
        self._likes.append(like.model_copy(update={"id": LikeId(uuid4())}))
        raise IntegrityError("duplicate key value", None, Exception())


class LockRecordingLikeRepository(InMemoryLikeRepository):
    """Like store that records pair locks and reads in order."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple] = []

    async def lock_pair(self, post_id, user_id):
        self.calls.append(("lock_pair", post_id, user_id))

    async def exists(self, post_id, user_id):
        self.calls.append(("exists", post_id, user_id))
        return await super().exists(post_id, user_id)


class FailingLikeRepository(InMemoryLikeRepository):
    async def exists(self, post_id, user_id):
        raise ConnectionError("database unavailable")


class FailingViewPostRepository(InMemoryPostRepository):
    async def increment_view_count(self, post_id):
        raise ConnectionError("database unavailable")


def make_service(
    post_repo=None, like_repo=None, recent_visits=None
) -> EngagementService:
    return EngagementService(
        post_repository=post_repo or InMemoryPostRepository(),
        like_repository=like_repo or InMemoryLikeRepository(),
        comment_repository=InMemoryCommentRepository(),
        recent_visits=recent_visits or RecentKeys(),
        toggle_locks=KeyedLocks(),
    )


class TestRecordView:
    """Tests for view counting."""

    @pytest.mark.asyncio
    async def test_one_view_increments_by_one(self, unit_env):
        # Arrange
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        counted = await engagement_service.record_view(post.id, visit_id="visit-1")

        # Assert
        assert counted is True
        assert (await post_repo.find_by_id(post.id)).view_count == 1

    @pytest.mark.asyncio
    async def test_two_visits_increment_by_two(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        await engagement_service.record_view(post.id, visit_id="visit-1")
        await engagement_service.record_view(post.id, visit_id="visit-2")

        assert (await post_repo.find_by_id(post.id)).view_count == 2

    @pytest.mark.asyncio
    async def test_rerender_of_same_visit_not_counted_again(self, unit_env):
        """The same visit id on a re-render must not increment."""
        # Arrange
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        await engagement_service.record_view(post.id, visit_id="visit-1")

        # Act
        counted = await engagement_service.record_view(post.id, visit_id="visit-1")

        # Assert
        assert counted is False
        assert (await post_repo.find_by_id(post.id)).view_count == 1

    @pytest.mark.asyncio
    async def test_same_visit_on_another_post_counts(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        first = await post_repo.save(make_post())
        second = await post_repo.save(make_post())

        await engagement_service.record_view(first.id, visit_id="visit-1")
        counted = await engagement_service.record_view(second.id, visit_id="visit-1")

        assert counted is True

    @pytest.mark.asyncio
    async def test_without_visit_id_every_call_counts(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        await engagement_service.record_view(post.id)
        await engagement_service.record_view(post.id)

        assert (await post_repo.find_by_id(post.id)).view_count == 2

    @pytest.mark.asyncio
    async def test_store_failure_is_swallowed_and_visit_can_retry(self):
        """A failed increment never raises and doesn't burn the visit id."""
        # Arrange
        recent_visits = RecentKeys()
        post = make_post()
        service = make_service(
            post_repo=FailingViewPostRepository(), recent_visits=recent_visits
        )

        # Act
        counted = await service.record_view(post.id, visit_id="visit-1")

        # Assert
        assert counted is False
        assert (post.id, "visit-1") not in recent_visits

    @pytest.mark.asyncio
    async def test_missing_post_not_counted_and_visit_released(self, unit_env):
        # Arrange
        engagement_service = await unit_env.get(EngagementService)
        recent_visits = await unit_env.get(RecentKeys)
        post_id = PostId(uuid4())

        # Act
        counted = await engagement_service.record_view(post_id, visit_id="visit-1")

        # Assert
        assert counted is False
        assert (post_id, "visit-1") not in recent_visits

    @pytest.mark.asyncio
    async def test_unpublished_post_not_counted(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(published=False))

        assert await engagement_service.record_view(draft.id) is False
        assert (await post_repo.find_by_id(draft.id)).view_count == 0


class TestToggleLike:
    """Tests for the like toggle."""

    @pytest.mark.asyncio
    async def test_signed_out_rejected_before_any_store_call(self):
        # Arrange
        post_repo = RecordingPostRepository()
        service = make_service(post_repo=post_repo)

        # Act & Assert
        with pytest.raises(NotAuthenticatedError):
            await service.toggle_like(PostId(uuid4()), None)
        assert post_repo.calls == []

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)

        with pytest.raises(NotFoundError):
            await engagement_service.toggle_like(PostId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unpublished_post_raises_not_found(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(published=False))

        with pytest.raises(NotFoundError):
            await engagement_service.toggle_like(draft.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_pair_locked_in_store_before_reading_like(self):
        """The store-level lock is taken before the liked check."""
        # Arrange
        post_repo = InMemoryPostRepository()
        post = await post_repo.save(make_post())
        like_repo = LockRecordingLikeRepository()
        service = make_service(post_repo=post_repo, like_repo=like_repo)
        user_id = UserId(uuid4())

        # Act
        await service.toggle_like(post.id, user_id)
        await service.toggle_like(post.id, user_id)

        # Assert
        assert like_repo.calls == [
            ("lock_pair", post.id, user_id),
            ("exists", post.id, user_id),
            ("lock_pair", post.id, user_id),
            ("exists", post.id, user_id),
        ]

    @pytest.mark.asyncio
    async def test_toggle_parity_without_duplicate_rows(self, unit_env):
        """Odd number of toggles flips the state, even restores it."""
        # Arrange
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())
        before = await like_repo.count_by_post(post.id)

        # Act & Assert
        first = await engagement_service.toggle_like(post.id, user_id)
        assert first.liked is True
        assert first.like_count == before + 1

        second = await engagement_service.toggle_like(post.id, user_id)
        assert second.liked is False
        assert second.like_count == before

        third = await engagement_service.toggle_like(post.id, user_id)
        assert third.liked is True
        assert await like_repo.count_by_post(post.id) == before + 1

    @pytest.mark.asyncio
    async def test_concurrent_toggles_serialize(self, unit_env):
        """Three simultaneous toggles end liked, with exactly one row."""
        # Arrange
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        user_id = UserId(uuid4())

        # Act
        states = await asyncio.gather(
            *[engagement_service.toggle_like(post.id, user_id) for _ in range(3)]
        )

        # Assert
        assert sorted(s.liked for s in states) == [False, True, True]
        assert await like_repo.exists(post.id, user_id)
        assert await like_repo.count_by_post(post.id) == 1

    @pytest.mark.asyncio
    async def test_duplicate_insert_is_reconciled(self):
        """A unique-constraint conflict means the like exists: report liked."""
        # Arrange
        post_repo = InMemoryPostRepository()
        post = await post_repo.save(make_post())
        service = make_service(post_repo=post_repo, like_repo=RacingLikeRepository())

        # Act
        state = await service.toggle_like(post.id, UserId(uuid4()))

        # Assert
        assert state.liked is True
        assert state.like_count == 1

    @pytest.mark.asyncio
    async def test_store_failure_raises_engagement_error(self):
        post_repo = InMemoryPostRepository()
        post = await post_repo.save(make_post())
        service = make_service(post_repo=post_repo, like_repo=FailingLikeRepository())

        with pytest.raises(EngagementError):
            await service.toggle_like(post.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_likes_from_different_users_add_up(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        await engagement_service.toggle_like(post.id, UserId(uuid4()))
        state = await engagement_service.toggle_like(post.id, UserId(uuid4()))

        assert state.like_count == 2


class TestGetEngagement:
    """Tests for reading counters."""

    @pytest.mark.asyncio
    async def test_counters_read_from_store(self, unit_env):
        # Arrange
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(view_count=12))
        user_id = UserId(uuid4())
        await engagement_service.toggle_like(post.id, user_id)
        await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                post_id=post.id,
                author_id=UserId(uuid4()),
                content="Nice",
            )
        )

        # Act
        snapshot = await engagement_service.get_engagement(post.id, user_id)

        # Assert
        assert snapshot.likes == 1
        assert snapshot.comments == 1
        assert snapshot.views == 12
        assert snapshot.liked is True

    @pytest.mark.asyncio
    async def test_anonymous_viewer_is_not_liked(self, unit_env):
        engagement_service = await unit_env.get(EngagementService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        snapshot = await engagement_service.get_engagement(post.id)

        assert snapshot.liked is False
