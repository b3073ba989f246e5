"""PostgreSQL implementation of Bookmark repository."""

from typing import List

from sqlalchemy import and_, delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Bookmark
from folio.domain.repository import BookmarkRepository
from folio.domain.value import PostId, UserId
from folio.persistence.database import lock_for_transaction
from folio.persistence.mappers import bookmark_to_dict, row_to_bookmark
from folio.persistence.tables import bookmarks_table


class PostgresBookmarkRepository(BookmarkRepository):
    """PostgreSQL implementation of BookmarkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def lock_pair(self, post_id: PostId, user_id: UserId) -> None:
        await lock_for_transaction(self.session, f"bookmark:{post_id}:{user_id}")

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has bookmarked a post."""
        stmt = select(bookmarks_table.c.id).where(
            and_(
                bookmarks_table.c.post_id == post_id,
                bookmarks_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def save(self, bookmark: Bookmark) -> Bookmark:
        """Save a bookmark inside a savepoint."""
        stmt = insert(bookmarks_table).values(**bookmark_to_dict(bookmark))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return bookmark

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a bookmark."""
        stmt = delete(bookmarks_table).where(
            and_(
                bookmarks_table.c.post_id == post_id,
                bookmarks_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_user(self, user_id: UserId) -> List[Bookmark]:
        """Find a user's bookmarks, newest first."""
        stmt = (
            select(bookmarks_table)
            .where(bookmarks_table.c.user_id == user_id)
            .order_by(desc(bookmarks_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_bookmark(row._asdict()) for row in result.fetchall()]
