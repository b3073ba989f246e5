"""Unit tests for RelevanceRanker."""

from folio.config import DiscoverySettings
from folio.domain.service import RelevanceRanker
from tests.conftest import NOW, make_post


def ranker() -> RelevanceRanker:
    return RelevanceRanker(DiscoverySettings())


class TestScore:
    """Tests for scoring one candidate."""

    def test_shared_tags_and_recency(self):
        reference = make_post(tags=["rust", "go"])
        candidate = make_post(tags=["rust", "go"], days_old=10)

        assert ranker().score(reference, candidate, NOW) == 40

    def test_recency_clamped_at_zero(self):
        """A post older than the window contributes nothing, never negative."""
        reference = make_post(tags=["rust"])
        candidate = make_post(tags=[], days_old=40)

        assert ranker().score(reference, candidate, NOW) == 0

    def test_partial_days_are_floored(self):
        reference = make_post()
        candidate = make_post(days_old=2.9)

        assert ranker().score(reference, candidate, NOW) == 28

    def test_more_shared_tags_scores_higher_at_equal_age(self):
        reference = make_post(tags=["a", "b", "c"])
        more = make_post(tags=["a", "b"], days_old=5)
        fewer = make_post(tags=["a"], days_old=5)

        assert ranker().score(reference, more, NOW) > ranker().score(
            reference, fewer, NOW
        )

    def test_weights_come_from_settings(self):
        custom = RelevanceRanker(DiscoverySettings(tag_weight=3, recency_window_days=0))
        reference = make_post(tags=["a", "b"])
        candidate = make_post(tags=["a", "b"], days_old=1)

        assert custom.score(reference, candidate, NOW) == 6


class TestRank:
    """Tests for ordering candidates."""

    def test_tag_overlap_then_recency_ordering(self):
        """P1=20+20, P2=10+28, P3=0+29 gives [P1, P2, P3]."""
        # Arrange
        reference = make_post(tags=["rust", "go"])
        p1 = make_post("P1", tags=["rust", "go"], days_old=10)
        p2 = make_post("P2", tags=["rust"], days_old=2)
        p3 = make_post("P3", tags=[], days_old=1)

        # Act
        ranked = ranker().rank(reference, [p3, p1, p2], NOW)

        # Assert
        assert [p.title for p in ranked] == ["P1", "P2", "P3"]

    def test_excludes_reference_and_unpublished(self):
        reference = make_post(tags=["rust"])
        draft = make_post(tags=["rust"], published=False)
        other = make_post(tags=["rust"])

        ranked = ranker().rank(reference, [reference, draft, other], NOW)

        assert ranked == [other]

    def test_ties_go_to_newer_post(self):
        # Both score 10: one shared tag, or ten days of recency
        reference = make_post(tags=["rust"])
        older = make_post("older", tags=["rust"], days_old=40)
        newer = make_post("newer", tags=[], days_old=20)

        ranked = ranker().rank(reference, [older, newer], NOW)

        assert [p.title for p in ranked] == ["newer", "older"]

    def test_related_respects_limit(self):
        reference = make_post(tags=["rust"])
        candidates = [make_post(tags=["rust"], days_old=i) for i in range(5)]

        related = ranker().related(reference, candidates, NOW)

        assert len(related) == 3
        assert related == candidates[:3]
