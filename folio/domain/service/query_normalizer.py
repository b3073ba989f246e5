"""Query normalization for content discovery."""

import calendar
from collections.abc import Iterable
from datetime import datetime, timedelta

import logfire

from folio.domain.model.common import utcnow
from folio.domain.value import CategoryId, DateRange, FilterPredicate, UserId

from .base import Service


def shift_months(moment: datetime, months: int) -> datetime:
    """Move a datetime by whole calendar months.

    The day is clamped to the length of the target month, so shifting
    March 31st back one month lands on the last day of February.

    Args:
        moment: Starting point
        months: Months to add (negative to go back)

    Returns:
        Shifted datetime with the same time of day and tzinfo
    """
    month_index = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def range_start(date_range: DateRange, now: datetime) -> datetime:
    """Earliest creation time included by a date range.

    Args:
        date_range: Selected date bucket
        now: Reference time

    Returns:
        Lower bound for ``created_at`` (inclusive)
    """
    if date_range is DateRange.WEEK:
        return now - timedelta(days=7)
    if date_range is DateRange.MONTH:
        return shift_months(now, -1)
    return shift_months(now, -12)


class QueryNormalizer(Service):
    """Turns a reader's raw query and facet selection into a FilterPredicate."""

    def normalize(
        self,
        text: str | None = None,
        author_id: UserId | None = None,
        category_id: CategoryId | None = None,
        tags: Iterable[str] = (),
        date_range: DateRange | None = None,
        now: datetime | None = None,
    ) -> FilterPredicate:
        """Build an immutable predicate from raw inputs.

        Args:
            text: Free-text query (empty or whitespace-only means no text clause)
            author_id: Restrict to one author
            category_id: Restrict to one category
            tags: Tags that must all be present (duplicates collapsed)
            date_range: Restrict to posts created within this window
            now: Reference time for the date window (defaults to current UTC time)

        Returns:
            Filter predicate
        """
        stripped = text.strip() if text else ""
        selected_tags = tuple(dict.fromkeys(tag for tag in tags if tag))

        created_after = None
        if date_range is not None:
            created_after = range_start(date_range, now or utcnow())

        predicate = FilterPredicate(
            text=stripped or None,
            author_id=author_id,
            category_id=category_id,
            tags=selected_tags,
            created_after=created_after,
        )
        logfire.debug(
            "Query normalized",
            has_text=predicate.has_text,
            tags=list(selected_tags),
            date_range=date_range.value if date_range else None,
        )
        return predicate
