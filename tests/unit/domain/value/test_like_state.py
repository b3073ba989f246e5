"""Unit tests for engagement value objects."""

from folio.domain.value import LikeState


class TestLikeState:
    """Tests for optimistic like state."""

    def test_optimistic_toggle_likes(self):
        state = LikeState(liked=False, like_count=4)

        assert state.optimistic_toggle() == LikeState(liked=True, like_count=5)

    def test_optimistic_toggle_unlikes(self):
        state = LikeState(liked=True, like_count=5)

        assert state.optimistic_toggle() == LikeState(liked=False, like_count=4)

    def test_optimistic_toggle_never_goes_negative(self):
        state = LikeState(liked=True, like_count=0)

        assert state.optimistic_toggle().like_count == 0

    def test_reconcile_replaces_optimistic_value(self):
        """The store's answer wins over whatever the client guessed."""
        # Arrange
        optimistic = LikeState(liked=False, like_count=2).optimistic_toggle()
        authoritative = LikeState(liked=True, like_count=7)

        # Act
        reconciled = optimistic.reconcile(authoritative)

        # Assert
        assert reconciled == authoritative
