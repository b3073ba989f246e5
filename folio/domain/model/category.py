"""Category entity.

Categories are a fixed facet dimension, many-to-many with posts.
"""

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import CategoryId, HexColor, Slug


class Category(DomainModel):
    """Category entity."""

    id: CategoryId
    name: str = Field(min_length=1, max_length=100)
    slug: Slug
    color: HexColor = HexColor("#6b7280")
