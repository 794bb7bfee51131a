"""PostgreSQL repository implementations."""

from forum.persistence.repository.article import PostgresArticleRepository
from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.conversation import PostgresConversationRepository
from forum.persistence.repository.portfolio import PostgresPortfolioRepository
from forum.persistence.repository.stock import PostgresStockRepository
from forum.persistence.repository.target import PostgresTargetRepository
from forum.persistence.repository.user import PostgresUserRepository
from forum.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresConversationRepository",
    "PostgresPortfolioRepository",
    "PostgresStockRepository",
    "PostgresTargetRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
