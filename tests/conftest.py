"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from forum.domain.model import (
    Article,
    Comment,
    Conversation,
    PortfolioPost,
    Stock,
    User,
)
from forum.domain.value import (
    ANONYMOUS_LABEL,
    ArticleCategory,
    ArticleId,
    CommentId,
    ConversationId,
    PortfolioCategory,
    PortfolioId,
    StockId,
    TargetRef,
    TargetType,
    UserId,
    Username,
)

BASE_TIME = datetime(2026, 1, 5, 9, 30)


def at(minutes: int) -> datetime:
    """Timestamp a fixed number of minutes after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "trader_joe", is_admin: bool = False) -> User:
    """Helper function to build a test user."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        is_admin=is_admin,
        created_at=BASE_TIME,
    )


def make_stock(symbol: str = "ACME", created_by: UserId | None = None, **fields) -> Stock:
    """Helper function to build a test stock."""
    data = {
        "id": StockId(uuid4()),
        "symbol": symbol,
        "name": f"{symbol} Corp",
        "current_price": 100.0,
        "percent_change": 1.5,
        "created_by": created_by or UserId(uuid4()),
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    data.update(fields)
    return Stock(**data)


def make_conversation(author: User | None = None, **fields) -> Conversation:
    """Helper function to build a test conversation (anonymous without author)."""
    data = {
        "id": ConversationId(uuid4()),
        "title": "Is the market overheated?",
        "content": "Asking for a friend.",
        "author_id": author.id if author else None,
        "author_name": author.username.root if author else ANONYMOUS_LABEL,
        "anonymous_author_id": None if author else "session-1",
        "is_anonymous": author is None,
        "created_at": BASE_TIME,
    }
    data.update(fields)
    return Conversation(**data)


def make_portfolio(author: User, **fields) -> PortfolioPost:
    """Helper function to build a test portfolio post."""
    data = {
        "id": PortfolioId(uuid4()),
        "title": "All in on ACME",
        "author_id": author.id,
        "author_name": author.username.root,
        "image_url": "https://cdn.example.com/portfolios/acme.png",
        "category": PortfolioCategory.YOLO,
        "created_at": BASE_TIME,
    }
    data.update(fields)
    return PortfolioPost(**data)


def make_comment(
    parent: TargetRef,
    author: User | None = None,
    parent_comment_id: CommentId | None = None,
    minutes: int = 0,
    content: str = "Great quarter.",
) -> Comment:
    """Helper function to build a test comment created ``minutes`` after BASE_TIME."""
    return Comment(
        id=CommentId(uuid4()),
        parent=parent,
        parent_comment_id=parent_comment_id,
        content=content,
        author_id=author.id if author else None,
        author_name=author.username.root if author else ANONYMOUS_LABEL,
        anonymous_author_id=None if author else "session-1",
        is_anonymous=author is None,
        is_reply=parent_comment_id is not None,
        created_at=at(minutes),
        updated_at=at(minutes),
    )


def stock_ref(stock: Stock) -> TargetRef:
    """Target reference of a stock."""
    return TargetRef(target_type=TargetType.STOCK, target_id=stock.id)


def make_article(
    author: User, minutes: int = 0, published: bool = True, **fields
) -> Article:
    """Helper function to build a test article written ``minutes`` after BASE_TIME."""
    data = {
        "id": ArticleId(uuid4()),
        "title": "Reading a balance sheet",
        "content": "Start with the cash flow statement.",
        "excerpt": "Where to start.",
        "category": ArticleCategory.EDUCATION,
        "read_time": 4,
        "author_id": author.id,
        "author_name": author.username.root,
        "is_published": published,
        "published_at": at(minutes) if published else None,
        "created_at": at(minutes),
        "updated_at": at(minutes),
    }
    data.update(fields)
    return Article(**data)
