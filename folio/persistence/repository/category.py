"""PostgreSQL implementation of Category repository."""

from typing import List, Set

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Category
from folio.domain.repository import CategoryRepository
from folio.domain.value import CategoryId, PostId
from folio.persistence.mappers import category_to_dict, row_to_category
from folio.persistence.tables import categories_table, post_categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self) -> List[Category]:
        """Find all categories ordered by name."""
        stmt = select(categories_table).order_by(categories_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def find_post_ids_by_category(self, category_id: CategoryId) -> Set[PostId]:
        """Find the IDs of posts assigned to a category."""
        stmt = select(post_categories_table.c.post_id).where(
            post_categories_table.c.category_id == category_id
        )
        result = await self.session.execute(stmt)
        return {PostId(row.post_id) for row in result.fetchall()}

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        category_dict = category_to_dict(category)
        stmt = insert(categories_table).values(**category_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[categories_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "slug": stmt.excluded.slug,
                "color": stmt.excluded.color,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return category

    async def assign(self, post_id: PostId, category_id: CategoryId) -> None:
        """Assign a post to a category (no-op if already assigned)."""
        stmt = (
            insert(post_categories_table)
            .values(post_id=post_id, category_id=category_id)
            .on_conflict_do_nothing(constraint="uq_post_category")
        )
        await self.session.execute(stmt)
        await self.session.flush()
