"""Domain services."""

from .aggregate_service import CommentAggregateService
from .article_service import ArticleService
from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree
from .conversation_service import ConversationService
from .identity_service import IdentityService
from .jwt_service import JWTService
from .portfolio_service import PortfolioPage, PortfolioService
from .stock_service import StockService
from .user_service import UserService
from .vote_service import VoteResult, VoteService

__all__ = [
    "ArticleService",
    "CommentAggregateService",
    "CommentNode",
    "CommentService",
    "ConversationService",
    "IdentityService",
    "JWTService",
    "PortfolioPage",
    "PortfolioService",
    "Service",
    "StockService",
    "UserService",
    "VoteResult",
    "VoteService",
    "build_comment_tree",
]
