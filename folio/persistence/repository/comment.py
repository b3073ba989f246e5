"""PostgreSQL implementation of Comment repository."""

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Comment
from folio.domain.repository import CommentRepository
from folio.domain.value import PostId
from folio.persistence.mappers import comment_to_dict
from folio.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_all(self) -> int:
        """Count comments across all posts."""
        stmt = select(func.count()).select_from(comments_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
