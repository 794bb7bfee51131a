"""initial_schema

Create the foundational schema for the stock forum:
- Users (authenticated accounts)
- Stocks, conversations and portfolio posts (commentable, votable content)
- Comments (one parent content item, optional parent comment for replies)
- Votes (one ledger for every target kind, user or anonymous fingerprint)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 10:12:45.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE portfolio_category AS ENUM (
                'YOLO', 'LOSSES', 'BOOMER', 'GAINS', 'CRYPTO', 'OPTIONS', 'OTHER'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE target_type AS ENUM (
                'stock', 'conversation', 'portfolio', 'comment'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_direction AS ENUM ('up', 'down');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # STOCKS table
    # ========================================================================
    op.create_table(
        "stocks",
        _id_column(),
        sa.Column("symbol", sa.String(20), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("exchange", sa.String(50), nullable=True),
        sa.Column("currency", sa.String(10), nullable=True),
        sa.Column("current_price", sa.Float(), nullable=False),
        sa.Column("previous_close", sa.Float(), nullable=True),
        sa.Column("percent_change", sa.Float(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislikes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_comment", postgresql.JSONB(), nullable=True),
        sa.Column("created_by", sa.UUID(), nullable=False),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("symbol", name="uq_stocks_symbol"),
        sa.CheckConstraint(
            "likes >= 0 AND dislikes >= 0", name="stock_votes_non_negative"
        ),
        sa.CheckConstraint(
            "comment_count >= 0", name="stock_comment_count_non_negative"
        ),
    )
    op.create_index(
        "idx_stocks_comment_count", "stocks", [sa.text("comment_count DESC")]
    )

    # ========================================================================
    # CONVERSATIONS table
    # ========================================================================
    op.create_table(
        "conversations",
        _id_column(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=True),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("anonymous_author_id", sa.String(255), nullable=True),
        sa.Column(
            "is_anonymous", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislikes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_comment", postgresql.JSONB(), nullable=True),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "likes >= 0 AND dislikes >= 0", name="conversation_votes_non_negative"
        ),
    )
    op.create_index(
        "idx_conversations_created_at",
        "conversations",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # PORTFOLIO_POSTS table
    # ========================================================================
    op.create_table(
        "portfolio_posts",
        _id_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("performance", sa.String(50), nullable=True),
        sa.Column(
            "category",
            postgresql.ENUM(
                "YOLO",
                "LOSSES",
                "BOOMER",
                "GAINS",
                "CRYPTO",
                "OPTIONS",
                "OTHER",
                name="portfolio_category",
                create_type=False,
            ),
            nullable=False,
            server_default="OTHER",
        ),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_comment", postgresql.JSONB(), nullable=True),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default="true"),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="portfolio_votes_non_negative"
        ),
    )
    op.create_index("idx_portfolio_posts_category", "portfolio_posts", ["category"])
    op.create_index(
        "idx_portfolio_posts_created_at",
        "portfolio_posts",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("stock_id", sa.UUID(), nullable=True),
        sa.Column("conversation_id", sa.UUID(), nullable=True),
        sa.Column("portfolio_id", sa.UUID(), nullable=True),
        # No FK: replies outlive a deleted parent comment
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=True),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("anonymous_author_id", sa.String(255), nullable=True),
        sa.Column(
            "is_anonymous", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("is_reply", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislikes", sa.Integer(), nullable=False, server_default="0"),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["stock_id"], ["stocks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["conversation_id"], ["conversations.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["portfolio_id"], ["portfolio_posts.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "num_nonnulls(stock_id, conversation_id, portfolio_id) = 1",
            name="comment_single_parent",
        ),
        sa.CheckConstraint(
            "NOT (is_anonymous AND author_id IS NOT NULL)",
            name="comment_single_attribution",
        ),
        sa.CheckConstraint(
            "likes >= 0 AND dislikes >= 0", name="comment_votes_non_negative"
        ),
    )
    op.create_index("idx_comments_stock_id", "comments", ["stock_id"])
    op.create_index("idx_comments_conversation_id", "comments", ["conversation_id"])
    op.create_index("idx_comments_portfolio_id", "comments", ["portfolio_id"])
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _id_column(),
        sa.Column(
            "target_type",
            postgresql.ENUM(
                "stock",
                "conversation",
                "portfolio",
                "comment",
                name="target_type",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("fingerprint", sa.String(255), nullable=True),
        sa.Column(
            "direction",
            postgresql.ENUM("up", "down", name="vote_direction", create_type=False),
            nullable=False,
        ),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(user_id IS NULL) <> (fingerprint IS NULL)", name="vote_single_voter"
        ),
    )
    op.create_index("idx_votes_target", "votes", ["target_type", "target_id"])

    # One vote per identity per target, partitioned on identity kind
    op.create_index(
        "uq_votes_target_user",
        "votes",
        ["target_type", "target_id", "user_id"],
        unique=True,
        postgresql_where=sa.text("user_id IS NOT NULL"),
    )
    op.create_index(
        "uq_votes_target_fingerprint",
        "votes",
        ["target_type", "target_id", "fingerprint"],
        unique=True,
        postgresql_where=sa.text("fingerprint IS NOT NULL"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("portfolio_posts")
    op.drop_table("conversations")
    op.drop_table("stocks")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS vote_direction")
    op.execute("DROP TYPE IF EXISTS target_type")
    op.execute("DROP TYPE IF EXISTS portfolio_category")
