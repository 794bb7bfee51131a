"""Shared state for the in-memory repositories.

Votes and comment aggregates touch several tables at once, so every
in-memory repository works on one store instead of keeping its own dict.
"""

import asyncio
from collections import defaultdict
from dataclasses import dataclass, field
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
    ArticleId,
    CommentId,
    ConversationId,
    PortfolioId,
    StockId,
    TargetRef,
    TargetType,
    UserId,
    VoteId,
)


@dataclass
class InMemoryStore:
    """Rows of every table, keyed by primary key."""

    users: dict[UserId, User] = field(default_factory=dict)
    articles: dict[ArticleId, Article] = field(default_factory=dict)
    stocks: dict[StockId, Stock] = field(default_factory=dict)
    conversations: dict[ConversationId, Conversation] = field(default_factory=dict)
    portfolios: dict[PortfolioId, PortfolioPost] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    votes: dict[VoteId, Vote] = field(default_factory=dict)
    locks: defaultdict[TargetRef, asyncio.Lock] = field(
        default_factory=lambda: defaultdict(asyncio.Lock)
    )

    def table_for(self, target_type: TargetType) -> dict[UUID, object]:
        """Get the rows holding targets of one type."""
        return {
            TargetType.STOCK: self.stocks,
            TargetType.CONVERSATION: self.conversations,
            TargetType.PORTFOLIO: self.portfolios,
            TargetType.COMMENT: self.comments,
        }[target_type]


async def round_trip() -> None:
    """Suspend once, the way an awaited database call would.

    Without this, concurrent tasks over the in-memory store would never
    interleave and races between them could not be exercised.
    """
    await asyncio.sleep(0)
