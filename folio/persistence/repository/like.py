"""PostgreSQL implementation of Like repository."""

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Like
from folio.domain.repository import LikeRepository
from folio.domain.value import PostId, UserId
from folio.persistence.database import lock_for_transaction
from folio.persistence.mappers import like_to_dict
from folio.persistence.tables import post_likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def lock_pair(self, post_id: PostId, user_id: UserId) -> None:
        """Advisory lock on the pair, released when the request commits."""
        await lock_for_transaction(self.session, f"like:{post_id}:{user_id}")

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether a user has liked a post."""
        stmt = select(post_likes_table.c.id).where(
            and_(
                post_likes_table.c.post_id == post_id,
                post_likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def save(self, like: Like) -> Like:
        """Save a like (create).

        The insert runs in a savepoint so a uniqueness conflict leaves the
        surrounding transaction usable.
        """
        stmt = insert(post_likes_table).values(**like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like on a post."""
        stmt = delete(post_likes_table).where(
            and_(
                post_likes_table.c.post_id == post_id,
                post_likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(post_likes_table)
            .where(post_likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_all(self) -> int:
        """Count likes across all posts."""
        stmt = select(func.count()).select_from(post_likes_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
