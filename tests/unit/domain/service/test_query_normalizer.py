"""Unit tests for QueryNormalizer."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from folio.domain.service import QueryNormalizer
from folio.domain.service.query_normalizer import range_start, shift_months
from folio.domain.value import DateRange, UserId
from tests.conftest import NOW


class TestNormalize:
    """Tests for building predicates."""

    def test_whitespace_text_means_no_text_clause(self):
        predicate = QueryNormalizer().normalize(text="   \t ")

        assert predicate.text is None
        assert predicate.is_empty

    def test_text_is_trimmed(self):
        predicate = QueryNormalizer().normalize(text="  rust async ")

        assert predicate.text == "rust async"

    def test_duplicate_and_empty_tags_collapsed(self):
        """Tag order is kept, repeats and blanks dropped."""
        predicate = QueryNormalizer().normalize(tags=["rust", "", "go", "rust"])

        assert predicate.tags == ("rust", "go")

    def test_date_range_becomes_lower_bound(self):
        predicate = QueryNormalizer().normalize(date_range=DateRange.WEEK, now=NOW)

        assert predicate.created_after == NOW - timedelta(days=7)

    def test_facets_carried_through(self):
        author = UserId(uuid4())

        predicate = QueryNormalizer().normalize(author_id=author)

        assert predicate.author_id == author
        assert predicate.has_facets


class TestDateRanges:
    """Tests for calendar month arithmetic."""

    def test_month_back_clamps_to_end_of_february(self):
        moment = datetime(2025, 3, 31, 9, 30, tzinfo=timezone.utc)

        assert shift_months(moment, -1) == datetime(
            2025, 2, 28, 9, 30, tzinfo=timezone.utc
        )

    def test_month_back_crosses_year_boundary(self):
        moment = datetime(2025, 1, 15, tzinfo=timezone.utc)

        assert shift_months(moment, -1) == datetime(2024, 12, 15, tzinfo=timezone.utc)

    def test_year_back_from_leap_day(self):
        moment = datetime(2024, 2, 29, tzinfo=timezone.utc)

        assert range_start(DateRange.YEAR, moment) == datetime(
            2023, 2, 28, tzinfo=timezone.utc
        )

    def test_month_range(self):
        assert range_start(DateRange.MONTH, NOW) == datetime(
            2025, 5, 15, 12, 0, tzinfo=timezone.utc
        )
