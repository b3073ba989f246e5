"""PostgreSQL implementation of Post repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Post
from folio.domain.repository.post import PostRepository
from folio.domain.value import PostId
from folio.persistence.mappers import post_to_dict, row_to_post
from folio.persistence.tables import posts_table

# Must match the expression indexed in the initial migration
_SEARCH_DOCUMENT = func.to_tsvector(
    "english",
    func.coalesce(posts_table.c.title, "")
    + " "
    + func.coalesce(posts_table.c.excerpt, "")
    + " "
    + func.coalesce(posts_table.c.content, ""),
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts in a single query."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_published(self, limit: Optional[int] = None) -> List[Post]:
        """Find published posts, newest first."""
        with logfire.span("post_repository.find_published", limit=limit):
            stmt = (
                select(posts_table)
                .where(posts_table.c.published.is_(True))
                .order_by(desc(posts_table.c.created_at), posts_table.c.id)
            )
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found published posts", count=len(posts))
            return posts

    async def find_all(self) -> List[Post]:
        """Find every post regardless of publication state."""
        stmt = select(posts_table).order_by(desc(posts_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def text_search(self, query: str) -> List[Post]:
        """Full-text search over published posts.

        Title, excerpt and body go through the English text search
        configuration; tags match exactly.
        """
        with logfire.span("post_repository.text_search", query=query):
            ts_query = func.plainto_tsquery("english", query)
            stmt = select(posts_table).where(
                posts_table.c.published.is_(True),
                _SEARCH_DOCUMENT.op("@@")(ts_query)
                | posts_table.c.tags.contains([query]),
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Text search matched", query=query, count=len(posts))
            return posts

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), title=post.title
        ):
            post_dict = post_to_dict(post)

            exists = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )
            if exists.fetchone():
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def increment_view_count(self, post_id: PostId) -> bool:
        """Atomically increment the view counter by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.published.is_(True))
            .values(view_count=posts_table.c.view_count + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def set_published(self, post_ids: Sequence[PostId], published: bool) -> int:
        """Publish or unpublish several posts."""
        if not post_ids:
            return 0

        with logfire.span(
            "post_repository.set_published", count=len(post_ids), published=published
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id.in_(post_ids))
                .values(published=published, updated_at=func.now())
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount  # type: ignore[attr-defined]
