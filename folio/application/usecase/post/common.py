"""Post representations shared by use cases."""

from datetime import datetime

from pydantic import BaseModel

from folio.domain.model.post import Post


class PostSummary(BaseModel):
    """Post as shown in lists and search results."""

    post_id: str
    title: str
    excerpt: str | None
    featured_image_url: str | None
    tags: list[str]
    author_id: str
    author_name: str | None
    is_featured: bool
    view_count: int
    reading_time: int  # Minutes
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostSummary":
        return cls(
            post_id=str(post.id),
            title=post.title,
            excerpt=post.excerpt,
            featured_image_url=post.featured_image_url,
            tags=list(post.tags),
            author_id=str(post.author_id),
            author_name=post.author_name,
            is_featured=post.is_featured,
            view_count=post.view_count,
            reading_time=post.reading_time,
            created_at=post.created_at,
        )


class PostDetail(PostSummary):
    """Full post for the reading view."""

    content: str
    meta_title: str | None
    meta_description: str | None
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostDetail":
        summary = PostSummary.from_post(post)
        return cls(
            **summary.model_dump(),
            content=post.content,
            meta_title=post.meta_title,
            meta_description=post.meta_description,
            updated_at=post.updated_at,
        )
