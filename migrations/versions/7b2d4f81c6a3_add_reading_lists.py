"""add_reading_lists

Named reading lists owned by a reader, and the posts saved on each.

Revision ID: 7b2d4f81c6a3
Revises: 3c1f0a9d5e42
Create Date: 2026-10-17 15:40:02.871934

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "7b2d4f81c6a3"
down_revision: Union[str, Sequence[str], None] = "3c1f0a9d5e42"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "reading_lists",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_reading_lists_user_created",
        "reading_lists",
        ["user_id", sa.text("created_at DESC")],
    )

    op.create_table(
        "reading_list_posts",
        sa.Column("reading_list_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column(
            "added_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["reading_list_id"], ["reading_lists.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("reading_list_id", "post_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("reading_list_posts")
    op.drop_index("idx_reading_lists_user_created", table_name="reading_lists")
    op.drop_table("reading_lists")
