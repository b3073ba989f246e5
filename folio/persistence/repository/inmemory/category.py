"""In-memory category repository for testing."""

from folio.domain.model.category import Category
from folio.domain.repository.category import CategoryRepository
from folio.domain.value import CategoryId, PostId


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}
        self._assignments: set[tuple[PostId, CategoryId]] = set()

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        return sorted(self._categories.values(), key=lambda c: c.name)

    async def find_post_ids_by_category(self, category_id: CategoryId) -> set[PostId]:
        """Find the IDs of posts assigned to a category."""
        return {pid for pid, cid in self._assignments if cid == category_id}

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        self._categories[category.id] = category
        return category

    async def assign(self, post_id: PostId, category_id: CategoryId) -> None:
        """Assign a post to a category."""
        self._assignments.add((post_id, category_id))
