"""SQLAlchemy table definitions for Folio.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
# Users live in the auth service; author_id is not a foreign key here.
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", Text, nullable=True),
    Column("featured_image_url", Text, nullable=True),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("author_id", UUID, nullable=False),
    Column("author_name", String(255), nullable=True),  # Denormalized from profiles
    Column("published", Boolean, nullable=False, server_default="false"),
    Column("is_featured", Boolean, nullable=False, server_default="false"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("meta_title", String(300), nullable=True),
    Column("meta_description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_published", posts_table.c.published)
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")
# Note: GIN full-text index over title/content/excerpt is created in migration

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column("color", String(7), nullable=False, server_default="#6b7280"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POST_CATEGORIES TABLE (junction table for many-to-many relationship)
# ============================================================================
post_categories_table = Table(
    "post_categories",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    UniqueConstraint("post_id", "category_id", name="uq_post_category"),
)

Index("idx_post_categories_category_id", post_categories_table.c.category_id)

# ============================================================================
# POST_LIKES TABLE
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_like"),
)

Index("idx_post_likes_post_id", post_likes_table.c.post_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# BOOKMARKS TABLE
# ============================================================================
bookmarks_table = Table(
    "bookmarks",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_bookmark"),
)

Index("idx_bookmarks_user_id", bookmarks_table.c.user_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),  # Recipient
    Column(
        "type",
        postgresql.ENUM(
            "new_post",
            "comment",
            "like",
            "follow",
            name="notification_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("message", Text, nullable=False, server_default=""),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "related_post_id",
        UUID,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("related_user_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# READING LISTS TABLES
# ============================================================================
reading_lists_table = Table(
    "reading_lists",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),  # Owner
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_reading_lists_user_created",
    reading_lists_table.c.user_id,
    reading_lists_table.c.created_at.desc(),
)

reading_list_posts_table = Table(
    "reading_list_posts",
    metadata,
    Column(
        "reading_list_id",
        UUID,
        ForeignKey("reading_lists.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "added_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
