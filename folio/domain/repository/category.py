"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Set

from folio.domain.model.category import Category
from folio.domain.value import CategoryId, PostId


class CategoryRepository(ABC):
    """Repository interface for categories and their post assignments."""

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """Find all categories ordered by name.

        Returns:
            List of categories
        """
        pass

    @abstractmethod
    async def find_post_ids_by_category(self, category_id: CategoryId) -> Set[PostId]:
        """Find the IDs of posts assigned to a category.

        Args:
            category_id: Category identifier

        Returns:
            Set of post IDs (empty if the category is unknown)
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save or update a category.

        Args:
            category: Category to save

        Returns:
            Saved category
        """
        pass

    @abstractmethod
    async def assign(self, post_id: PostId, category_id: CategoryId) -> None:
        """Assign a post to a category (no-op if already assigned).

        Args:
            post_id: Post identifier
            category_id: Category identifier
        """
        pass
