"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .conversation import InMemoryConversationRepository
from .portfolio import InMemoryPortfolioRepository
from .stock import InMemoryStockRepository
from .store import InMemoryStore
from .target import InMemoryTargetRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryConversationRepository",
    "InMemoryPortfolioRepository",
    "InMemoryStockRepository",
    "InMemoryStore",
    "InMemoryTargetRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
