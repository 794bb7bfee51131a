"""Domain model entities for the forum."""

from forum.domain.model.article import Article
from forum.domain.model.comment import Comment
from forum.domain.model.conversation import Conversation
from forum.domain.model.portfolio import PortfolioPost
from forum.domain.model.stock import Stock
from forum.domain.model.user import User
from forum.domain.model.vote import Vote

__all__ = [
    "User",
    "Stock",
    "Conversation",
    "PortfolioPost",
    "Comment",
    "Vote",
    "Article",
]
