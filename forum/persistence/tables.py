"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# STOCKS TABLE
# ============================================================================
stocks_table = Table(
    "stocks",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("symbol", String(20), nullable=False, unique=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("exchange", String(50), nullable=True),
    Column("currency", String(10), nullable=True),
    Column("current_price", Float, nullable=False),
    Column("previous_close", Float, nullable=True),
    Column("percent_change", Float, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("last_comment", JSONB, nullable=True),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0 AND dislikes >= 0", name="stock_votes_non_negative"),
    CheckConstraint("comment_count >= 0", name="stock_comment_count_non_negative"),
)

Index("idx_stocks_comment_count", stocks_table.c.comment_count.desc())

# ============================================================================
# CONVERSATIONS TABLE
# ============================================================================
conversations_table = Table(
    "conversations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized from users
    Column("anonymous_author_id", String(255), nullable=True),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("last_comment", JSONB, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "likes >= 0 AND dislikes >= 0", name="conversation_votes_non_negative"
    ),
)

Index("idx_conversations_created_at", conversations_table.c.created_at.desc())

# ============================================================================
# PORTFOLIO POSTS TABLE
# ============================================================================
portfolio_posts_table = Table(
    "portfolio_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("description", String(1000), nullable=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized from users
    Column("image_url", Text, nullable=False),
    Column("thumbnail_url", Text, nullable=True),
    Column("performance", String(50), nullable=True),
    Column(
        "category",
        Enum(
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
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("last_comment", JSONB, nullable=True),
    Column("is_premium", Boolean, nullable=False, server_default="false"),
    Column("is_approved", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvotes >= 0 AND downvotes >= 0", name="portfolio_votes_non_negative"
    ),
)

Index("idx_portfolio_posts_category", portfolio_posts_table.c.category)
Index("idx_portfolio_posts_created_at", portfolio_posts_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "stock_id", UUID, ForeignKey("stocks.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "conversation_id",
        UUID,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "portfolio_id",
        UUID,
        ForeignKey("portfolio_posts.id", ondelete="CASCADE"),
        nullable=True,
    ),
    # No FK: replies outlive a deleted parent comment
    Column("parent_comment_id", UUID, nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("author_name", String(255), nullable=False),  # Denormalized from users
    Column("anonymous_author_id", String(255), nullable=True),
    Column("is_anonymous", Boolean, nullable=False, server_default="false"),
    Column("is_reply", Boolean, nullable=False, server_default="false"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "num_nonnulls(stock_id, conversation_id, portfolio_id) = 1",
        name="comment_single_parent",
    ),
    CheckConstraint(
        "NOT (is_anonymous AND author_id IS NOT NULL)",
        name="comment_single_attribution",
    ),
    CheckConstraint("likes >= 0 AND dislikes >= 0", name="comment_votes_non_negative"),
)

Index("idx_comments_stock_id", comments_table.c.stock_id)
Index("idx_comments_conversation_id", comments_table.c.conversation_id)
Index("idx_comments_portfolio_id", comments_table.c.portfolio_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# VOTES TABLE (all target kinds, authenticated and anonymous voters)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "target_type",
        Enum(
            "stock",
            "conversation",
            "portfolio",
            "comment",
            name="target_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
    Column("fingerprint", String(255), nullable=True),
    Column(
        "direction",
        Enum("up", "down", name="vote_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(user_id IS NULL) <> (fingerprint IS NULL)", name="vote_single_voter"
    ),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)

# One vote per identity per target, partitioned on identity kind
Index(
    "uq_votes_target_user",
    votes_table.c.target_type,
    votes_table.c.target_id,
    votes_table.c.user_id,
    unique=True,
    postgresql_where=votes_table.c.user_id.isnot(None),
)
Index(
    "uq_votes_target_fingerprint",
    votes_table.c.target_type,
    votes_table.c.target_id,
    votes_table.c.fingerprint,
    unique=True,
    postgresql_where=votes_table.c.fingerprint.isnot(None),
)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", String(300), nullable=False),
    Column("category", String(50), nullable=False),
    Column("read_time", Integer, nullable=False, server_default="1"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(255), nullable=False),
    Column("is_published", Boolean, nullable=False, server_default="false"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("read_time >= 1", name="article_read_time_positive"),
    CheckConstraint(
        "is_published = (published_at IS NOT NULL)", name="article_publication_date"
    ),
)

Index("idx_articles_published_at", articles_table.c.published_at.desc())
