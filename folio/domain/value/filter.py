"""Filter predicate for content discovery.

The predicate is the canonical, immutable form of a reader's query and
selected facets. Every clause is a conjunct, so clauses commute and the
order they are applied in never changes the result set.
"""

from collections.abc import Collection
from datetime import datetime
from typing import TYPE_CHECKING

from folio.domain.value.common import ValueObject
from folio.domain.value.identifiers import CategoryId, PostId, UserId

if TYPE_CHECKING:
    from folio.domain.model.post import Post


class FilterPredicate(ValueObject):
    """Conjunction of text, author, category, tag and date clauses.

    A clause left as None (or an empty tag tuple) is always true.
    """

    text: str | None = None
    author_id: UserId | None = None
    category_id: CategoryId | None = None
    tags: tuple[str, ...] = ()
    created_after: datetime | None = None

    @property
    def has_text(self) -> bool:
        """Whether matching needs the text search engine."""
        return self.text is not None

    @property
    def has_facets(self) -> bool:
        """Whether any author/category/tag/date clause is active."""
        return (
            self.author_id is not None
            or self.category_id is not None
            or bool(self.tags)
            or self.created_after is not None
        )

    @property
    def is_empty(self) -> bool:
        """True when resolving this predicate returns every published post."""
        return not self.has_text and not self.has_facets

    def matches(
        self,
        post: "Post",
        category_post_ids: Collection[PostId] | None = None,
    ) -> bool:
        """Evaluate the facet clauses against a post.

        The text clause is not evaluated here; it is resolved by the
        search engine before facets are applied.

        Args:
            post: Candidate post
            category_post_ids: Posts in the selected category (required
                when ``category_id`` is set, otherwise ignored)

        Returns:
            True if the post satisfies every active facet clause
        """
        if self.author_id is not None and post.author_id != self.author_id:
            return False

        if self.category_id is not None:
            if category_post_ids is None or post.id not in category_post_ids:
                return False

        # Tags narrow conjunctively: every selected tag must be present
        if self.tags and not set(self.tags).issubset(post.tags):
            return False

        if self.created_after is not None and post.created_at < self.created_after:
            return False

        return True
