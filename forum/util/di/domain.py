"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings
from forum.domain.repository import (
    ArticleRepository,
    CommentRepository,
    ConversationRepository,
    PortfolioRepository,
    StockRepository,
    TargetRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import (
    ArticleService,
    CommentAggregateService,
    CommentService,
    ConversationService,
    IdentityService,
    JWTService,
    PortfolioService,
    StockService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(self, jwt_service: JWTService) -> IdentityService:
        """Provide caller identity resolution."""
        return IdentityService(jwt_service=jwt_service)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        target_repository: TargetRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            target_repository=target_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        target_repository: TargetRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            target_repository=target_repository,
        )

    @provide
    def get_aggregate_service(
        self,
        target_repository: TargetRepository,
        comment_repository: CommentRepository,
    ) -> CommentAggregateService:
        """Provide comment aggregate service."""
        return CommentAggregateService(
            target_repository=target_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_stock_service(self, stock_repository: StockRepository) -> StockService:
        """Provide stock domain service."""
        return StockService(stock_repository=stock_repository)

    @provide
    def get_conversation_service(
        self, conversation_repository: ConversationRepository
    ) -> ConversationService:
        """Provide conversation domain service."""
        return ConversationService(conversation_repository=conversation_repository)

    @provide
    def get_portfolio_service(
        self, portfolio_repository: PortfolioRepository
    ) -> PortfolioService:
        """Provide portfolio domain service."""
        return PortfolioService(portfolio_repository=portfolio_repository)

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)
