"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from forum.domain.model import (
    Article,
    Comment,
    Conversation,
    PortfolioPost,
    Stock,
    User,
    Vote,
)
from forum.domain.value import (
    ArticleCategory,
    ArticleId,
    CommentId,
    ConversationId,
    Identity,
    LastComment,
    PortfolioCategory,
    PortfolioId,
    StockId,
    TargetRef,
    TargetType,
    UserId,
    Username,
    VoteDirection,
    VoteId,
)

# Comment parent column for each content type
PARENT_COLUMNS: Dict[TargetType, str] = {
    TargetType.STOCK: "stock_id",
    TargetType.CONVERSATION: "conversation_id",
    TargetType.PORTFOLIO: "portfolio_id",
}


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def row_to_last_comment(value: Optional[Dict[str, Any]]) -> Optional[LastComment]:
    """Convert the JSONB snapshot column to a LastComment."""
    return LastComment.model_validate(value) if value else None


def last_comment_to_json(last_comment: Optional[LastComment]) -> Optional[Dict[str, Any]]:
    """Convert a LastComment to a JSON-serializable dict for the JSONB column."""
    return last_comment.model_dump(mode="json") if last_comment else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        is_admin=row["is_admin"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_stock(row: Dict[str, Any]) -> Stock:
    """Convert database row to Stock domain model.

    Args:
        row: Database row as dict

    Returns:
        Stock domain model
    """
    return Stock(
        id=StockId(_uuid(row["id"])),
        symbol=row["symbol"],
        name=row["name"],
        description=row.get("description"),
        exchange=row.get("exchange"),
        currency=row.get("currency"),
        current_price=row["current_price"],
        previous_close=row.get("previous_close"),
        percent_change=row["percent_change"],
        likes=row["likes"],
        dislikes=row["dislikes"],
        comment_count=row["comment_count"],
        last_comment=row_to_last_comment(row.get("last_comment")),
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def stock_to_dict(stock: Stock) -> Dict[str, Any]:
    """Convert Stock domain model to database dict."""
    data = stock.model_dump(exclude={"last_comment"})
    data["last_comment"] = last_comment_to_json(stock.last_comment)
    return data


def row_to_conversation(row: Dict[str, Any]) -> Conversation:
    """Convert database row to Conversation domain model."""
    return Conversation(
        id=ConversationId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])) if row.get("author_id") else None,
        author_name=row["author_name"],
        anonymous_author_id=row.get("anonymous_author_id"),
        is_anonymous=row["is_anonymous"],
        likes=row["likes"],
        dislikes=row["dislikes"],
        comment_count=row["comment_count"],
        last_comment=row_to_last_comment(row.get("last_comment")),
        created_at=row["created_at"],
    )


def conversation_to_dict(conversation: Conversation) -> Dict[str, Any]:
    """Convert Conversation domain model to database dict."""
    data = conversation.model_dump(exclude={"last_comment"})
    data["last_comment"] = last_comment_to_json(conversation.last_comment)
    return data


def row_to_portfolio(row: Dict[str, Any]) -> PortfolioPost:
    """Convert database row to PortfolioPost domain model."""
    return PortfolioPost(
        id=PortfolioId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        image_url=row["image_url"],
        thumbnail_url=row.get("thumbnail_url"),
        performance=row.get("performance"),
        category=PortfolioCategory(row["category"]),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        comment_count=row["comment_count"],
        last_comment=row_to_last_comment(row.get("last_comment")),
        is_premium=row["is_premium"],
        is_approved=row["is_approved"],
        created_at=row["created_at"],
    )


def portfolio_to_dict(post: PortfolioPost) -> Dict[str, Any]:
    """Convert PortfolioPost domain model to database dict."""
    data = post.model_dump(exclude={"last_comment"})
    data["category"] = post.category.value
    data["last_comment"] = last_comment_to_json(post.last_comment)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The parent reference is taken from whichever of the three parent
    columns is set.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        parent=TargetRef.from_parent_ids(
            stock_id=_optional_uuid(row.get("stock_id")),
            conversation_id=_optional_uuid(row.get("conversation_id")),
            portfolio_id=_optional_uuid(row.get("portfolio_id")),
        ),
        parent_comment_id=CommentId(_uuid(row["parent_comment_id"]))
        if row.get("parent_comment_id")
        else None,
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])) if row.get("author_id") else None,
        author_name=row["author_name"],
        anonymous_author_id=row.get("anonymous_author_id"),
        is_anonymous=row["is_anonymous"],
        is_reply=row["is_reply"],
        likes=row["likes"],
        dislikes=row["dislikes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump(exclude={"parent"})
    for column in PARENT_COLUMNS.values():
        data[column] = None
    data[PARENT_COLUMNS[comment.parent.target_type]] = comment.parent.target_id
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    voter = (
        Identity.authenticated(UserId(_uuid(row["user_id"])))
        if row.get("user_id")
        else Identity.anonymous(row["fingerprint"])
    )
    return Vote(
        id=VoteId(_uuid(row["id"])),
        target=TargetRef(
            target_type=TargetType(row["target_type"]),
            target_id=_uuid(row["target_id"]),
        ),
        voter=voter,
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "target_type": vote.target.target_type.value,
        "target_id": vote.target.target_id,
        "user_id": vote.voter.user_id,
        "fingerprint": vote.voter.fingerprint,
        "direction": vote.direction.value,
        "created_at": vote.created_at,
    }


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        excerpt=row["excerpt"],
        category=ArticleCategory(row["category"]),
        read_time=row["read_time"],
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        is_published=row["is_published"],
        published_at=row.get("published_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    data = article.model_dump()
    data["category"] = article.category.value
    return data
