"""PostgreSQL implementation of ReadingList repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import ReadingList
from folio.domain.repository import ReadingListRepository
from folio.domain.value import PostId, ReadingListId, UserId
from folio.persistence.mappers import reading_list_to_dict, row_to_reading_list
from folio.persistence.tables import reading_list_posts_table, reading_lists_table


class PostgresReadingListRepository(ReadingListRepository):
    """PostgreSQL implementation of ReadingListRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, list_id: ReadingListId) -> Optional[ReadingList]:
        """Find a reading list by ID."""
        stmt = select(reading_lists_table).where(reading_lists_table.c.id == list_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        post_ids = await self._post_ids_for([list_id])
        return row_to_reading_list(row._asdict(), post_ids[list_id])

    async def find_by_user(self, user_id: UserId) -> List[ReadingList]:
        """Find a user's reading lists, newest first."""
        stmt = (
            select(reading_lists_table)
            .where(reading_lists_table.c.user_id == user_id)
            .order_by(desc(reading_lists_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        if not rows:
            return []

        # One query for all entries instead of one per list
        post_ids = await self._post_ids_for([row["id"] for row in rows])
        return [row_to_reading_list(row, post_ids[row["id"]]) for row in rows]

    async def save(self, reading_list: ReadingList) -> ReadingList:
        """Save a reading list (create)."""
        stmt = insert(reading_lists_table).values(
            **reading_list_to_dict(reading_list)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return reading_list

    async def delete(self, list_id: ReadingListId) -> bool:
        """Delete a reading list; its entries go with it (ON DELETE CASCADE)."""
        stmt = delete(reading_lists_table).where(reading_lists_table.c.id == list_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_post(self, list_id: ReadingListId, post_id: PostId) -> None:
        """Append a post inside a savepoint so a duplicate keeps the session usable."""
        stmt = insert(reading_list_posts_table).values(
            reading_list_id=list_id, post_id=post_id
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()

    async def remove_post(self, list_id: ReadingListId, post_id: PostId) -> bool:
        """Take a post off a list."""
        stmt = delete(reading_list_posts_table).where(
            and_(
                reading_list_posts_table.c.reading_list_id == list_id,
                reading_list_posts_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def _post_ids_for(self, list_ids: List[UUID]) -> dict[UUID, List[UUID]]:
        stmt = (
            select(
                reading_list_posts_table.c.reading_list_id,
                reading_list_posts_table.c.post_id,
            )
            .where(reading_list_posts_table.c.reading_list_id.in_(list_ids))
            .order_by(reading_list_posts_table.c.added_at)
        )
        result = await self.session.execute(stmt)
        post_ids: dict[UUID, List[UUID]] = defaultdict(list)
        for list_id, post_id in result.fetchall():
            post_ids[list_id].append(post_id)
        return post_ids
