"""Strongly typed identifiers for forum entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
StockId = NewType("StockId", UUID)
ConversationId = NewType("ConversationId", UUID)
PortfolioId = NewType("PortfolioId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
ArticleId = NewType("ArticleId", UUID)
