"""Unit tests for FilterPredicate."""

from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError

from folio.domain.value import CategoryId, FilterPredicate, UserId
from tests.conftest import NOW, make_post


class TestFilterPredicate:
    """Tests for facet matching."""

    def test_empty_predicate_matches_everything(self):
        """A predicate with no clauses should match any post."""
        predicate = FilterPredicate()

        assert predicate.is_empty
        assert predicate.matches(make_post(tags=["rust"]))

    def test_text_only_predicate_is_not_empty_but_has_no_facets(self):
        predicate = FilterPredicate(text="rust")

        assert predicate.has_text
        assert not predicate.has_facets
        assert not predicate.is_empty

    def test_tags_are_conjunctive(self):
        """Every selected tag must be present on the post."""
        # Arrange
        predicate = FilterPredicate(tags=("rust", "async"))
        both = make_post(tags=["rust", "async", "tokio"])
        one = make_post(tags=["rust"])

        # Act & Assert
        assert predicate.matches(both)
        assert not predicate.matches(one)

    def test_tags_are_case_sensitive(self):
        predicate = FilterPredicate(tags=("Rust",))

        assert not predicate.matches(make_post(tags=["rust"]))

    def test_author_clause(self):
        author = UserId(uuid4())
        predicate = FilterPredicate(author_id=author)

        assert predicate.matches(make_post(author_id=author))
        assert not predicate.matches(make_post())

    def test_category_clause_requires_membership(self):
        """Category matching uses the post ids assigned to the category."""
        # Arrange
        predicate = FilterPredicate(category_id=CategoryId(uuid4()))
        inside = make_post()
        outside = make_post()

        # Act & Assert
        assert predicate.matches(inside, {inside.id})
        assert not predicate.matches(outside, {inside.id})
        assert not predicate.matches(inside, None)

    def test_created_after_clause(self):
        predicate = FilterPredicate(created_after=NOW - timedelta(days=7))

        assert predicate.matches(make_post(days_old=3))
        assert not predicate.matches(make_post(days_old=10))

    def test_predicate_is_immutable(self):
        predicate = FilterPredicate(text="rust")

        with pytest.raises(ValidationError):
            predicate.text = "python"
