"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    ArticleId,
    CommentId,
    ConversationId,
    PortfolioId,
    StockId,
    UserId,
    VoteId,
)
from forum.domain.value.types import (
    ANONYMOUS_LABEL,
    ArticleCategory,
    EXCERPT_LIMIT,
    FINGERPRINT_LIMIT,
    Identity,
    IdentityKind,
    LastComment,
    PortfolioCategory,
    PortfolioSort,
    TargetRef,
    TargetType,
    Username,
    VoteDirection,
    VoteTally,
)

__all__ = [
    # Identifiers
    "UserId",
    "StockId",
    "ConversationId",
    "PortfolioId",
    "CommentId",
    "VoteId",
    "ArticleId",
    # Types
    "ANONYMOUS_LABEL",
    "ArticleCategory",
    "EXCERPT_LIMIT",
    "FINGERPRINT_LIMIT",
    "Identity",
    "IdentityKind",
    "LastComment",
    "PortfolioCategory",
    "PortfolioSort",
    "TargetRef",
    "TargetType",
    "Username",
    "VoteDirection",
    "VoteTally",
]
