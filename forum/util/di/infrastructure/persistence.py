"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    ArticleRepository,
    CommentRepository,
    ConversationRepository,
    PortfolioRepository,
    StockRepository,
    TargetRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresArticleRepository,
    PostgresCommentRepository,
    PostgresConversationRepository,
    PostgresPortfolioRepository,
    PostgresStockRepository,
    PostgresTargetRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from forum.persistence.unit_of_work import SqlUnitOfWork
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The whole request is one transaction. It is committed through
        UnitOfWork before the response is sent; anything still pending when
        the request scope closes is rolled back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide the request transaction."""
        return SqlUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_stock_repository(self, session: AsyncSession) -> StockRepository:
        """Provide Stock repository."""
        return PostgresStockRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(
        self, session: AsyncSession
    ) -> ConversationRepository:
        """Provide Conversation repository."""
        return PostgresConversationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_portfolio_repository(self, session: AsyncSession) -> PortfolioRepository:
        """Provide Portfolio repository."""
        return PostgresPortfolioRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_target_repository(self, session: AsyncSession) -> TargetRepository:
        """Provide Target repository."""
        return PostgresTargetRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_article_repository(self, session: AsyncSession) -> ArticleRepository:
        """Provide Article repository."""
        return PostgresArticleRepository(session)
