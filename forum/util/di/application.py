"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    UpdateArticleUseCase,
)
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from forum.application.usecase.conversation import (
    CreateConversationUseCase,
    GetConversationUseCase,
    ListConversationsUseCase,
)
from forum.application.usecase.portfolio import (
    CreatePortfolioUseCase,
    DeletePortfolioUseCase,
    GetPortfolioUseCase,
    ListPortfoliosUseCase,
)
from forum.application.usecase.stock import (
    CreateStockUseCase,
    DeleteStockUseCase,
    GetStockUseCase,
    ListStocksUseCase,
    UpdateStockUseCase,
)
from forum.application.usecase.user import GetCurrentUserUseCase, UpdateUsernameUseCase
from forum.application.usecase.vote import ApplyVoteUseCase, RemoveVoteUseCase
from forum.config import PortfolioSettings
from forum.domain.service import (
    ArticleService,
    CommentAggregateService,
    CommentService,
    ConversationService,
    PortfolioService,
    StockService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        aggregate_service: CommentAggregateService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            aggregate_service=aggregate_service,
            user_service=user_service,
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, vote_service: VoteService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, vote_service=vote_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        aggregate_service: CommentAggregateService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            vote_service=vote_service,
            aggregate_service=aggregate_service,
        )

    # Vote use cases
    @provide
    def get_apply_vote_use_case(self, vote_service: VoteService) -> ApplyVoteUseCase:
        """Provide apply vote use case."""
        return ApplyVoteUseCase(vote_service=vote_service)

    @provide
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    # Stock use cases
    @provide
    def get_list_stocks_use_case(
        self, stock_service: StockService, vote_service: VoteService
    ) -> ListStocksUseCase:
        """Provide list stocks use case."""
        return ListStocksUseCase(stock_service=stock_service, vote_service=vote_service)

    @provide
    def get_get_stock_use_case(
        self, stock_service: StockService, vote_service: VoteService
    ) -> GetStockUseCase:
        """Provide get stock use case."""
        return GetStockUseCase(stock_service=stock_service, vote_service=vote_service)

    @provide
    def get_create_stock_use_case(self, stock_service: StockService) -> CreateStockUseCase:
        """Provide create stock use case."""
        return CreateStockUseCase(stock_service=stock_service)

    @provide
    def get_update_stock_use_case(self, stock_service: StockService) -> UpdateStockUseCase:
        """Provide update stock use case."""
        return UpdateStockUseCase(stock_service=stock_service)

    @provide
    def get_delete_stock_use_case(
        self,
        stock_service: StockService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> DeleteStockUseCase:
        """Provide delete stock use case."""
        return DeleteStockUseCase(
            stock_service=stock_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # Conversation use cases
    @provide
    def get_list_conversations_use_case(
        self, conversation_service: ConversationService, vote_service: VoteService
    ) -> ListConversationsUseCase:
        """Provide list conversations use case."""
        return ListConversationsUseCase(
            conversation_service=conversation_service, vote_service=vote_service
        )

    @provide
    def get_get_conversation_use_case(
        self, conversation_service: ConversationService, vote_service: VoteService
    ) -> GetConversationUseCase:
        """Provide get conversation use case."""
        return GetConversationUseCase(
            conversation_service=conversation_service, vote_service=vote_service
        )

    @provide
    def get_create_conversation_use_case(
        self, conversation_service: ConversationService, user_service: UserService
    ) -> CreateConversationUseCase:
        """Provide create conversation use case."""
        return CreateConversationUseCase(
            conversation_service=conversation_service, user_service=user_service
        )

    # Portfolio use cases
    @provide
    def get_list_portfolios_use_case(
        self,
        portfolio_service: PortfolioService,
        vote_service: VoteService,
        settings: PortfolioSettings,
    ) -> ListPortfoliosUseCase:
        """Provide list portfolios use case."""
        return ListPortfoliosUseCase(
            portfolio_service=portfolio_service,
            vote_service=vote_service,
            settings=settings,
        )

    @provide
    def get_get_portfolio_use_case(
        self, portfolio_service: PortfolioService, vote_service: VoteService
    ) -> GetPortfolioUseCase:
        """Provide get portfolio use case."""
        return GetPortfolioUseCase(
            portfolio_service=portfolio_service, vote_service=vote_service
        )

    @provide
    def get_create_portfolio_use_case(
        self, portfolio_service: PortfolioService, user_service: UserService
    ) -> CreatePortfolioUseCase:
        """Provide create portfolio use case."""
        return CreatePortfolioUseCase(
            portfolio_service=portfolio_service, user_service=user_service
        )

    @provide
    def get_delete_portfolio_use_case(
        self,
        portfolio_service: PortfolioService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> DeletePortfolioUseCase:
        """Provide delete portfolio use case."""
        return DeletePortfolioUseCase(
            portfolio_service=portfolio_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    # Article use cases
    @provide
    def get_list_articles_use_case(
        self, article_service: ArticleService, user_service: UserService
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(
            article_service=article_service, user_service=user_service
        )

    @provide
    def get_get_article_use_case(
        self, article_service: ArticleService
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(article_service=article_service)

    @provide
    def get_create_article_use_case(
        self, article_service: ArticleService, user_service: UserService
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(
            article_service=article_service, user_service=user_service
        )

    @provide
    def get_update_article_use_case(
        self, article_service: ArticleService, user_service: UserService
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(
            article_service=article_service, user_service=user_service
        )

    @provide
    def get_delete_article_use_case(
        self, article_service: ArticleService, user_service: UserService
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(
            article_service=article_service, user_service=user_service
        )

    # User use cases
    @provide
    def get_get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide
    def get_update_username_use_case(
        self, user_service: UserService
    ) -> UpdateUsernameUseCase:
        """Provide update username use case."""
        return UpdateUsernameUseCase(user_service=user_service)
