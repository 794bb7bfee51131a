"""Create portfolio use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import PortfolioService, UserService
from forum.domain.value import PortfolioCategory, UserId

from .get_portfolio import PortfolioItem, portfolio_item


class CreatePortfolioRequest(BaseModel):
    """Create portfolio request."""

    title: str
    image_url: str
    thumbnail_url: str | None = None
    description: str | None = None
    performance: str | None = None
    category: PortfolioCategory = PortfolioCategory.OTHER
    user_id: UUID  # Authenticated author


class CreatePortfolioUseCase:
    """Use case for sharing a portfolio."""

    def __init__(
        self, portfolio_service: PortfolioService, user_service: UserService
    ) -> None:
        """Initialize create portfolio use case.

        Args:
            portfolio_service: Portfolio domain service
            user_service: User service, for the author's display name
        """
        self.portfolio_service = portfolio_service
        self.user_service = user_service

    async def execute(self, request: CreatePortfolioRequest) -> PortfolioItem:
        """Execute create portfolio flow.

        Raises:
            ValidationError: If the title or image is missing
            NotFoundError: If the author has no user record
        """
        author = await self.user_service.require_user(UserId(request.user_id))
        post = await self.portfolio_service.create_portfolio(
            title=request.title,
            author_id=author.id,
            author_name=author.username.root,
            image_url=request.image_url,
            thumbnail_url=request.thumbnail_url,
            description=request.description,
            performance=request.performance,
            category=request.category,
        )
        return portfolio_item(post)
