"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.article import ArticleRepository
from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.conversation import ConversationRepository
from forum.domain.repository.portfolio import PortfolioRepository
from forum.domain.repository.stock import StockRepository
from forum.domain.repository.target import TargetRepository
from forum.domain.repository.unit_of_work import UnitOfWork
from forum.domain.repository.user import UserRepository
from forum.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "StockRepository",
    "ConversationRepository",
    "PortfolioRepository",
    "CommentRepository",
    "VoteRepository",
    "TargetRepository",
    "ArticleRepository",
    "UnitOfWork",
]
