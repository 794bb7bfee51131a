"""List portfolios use case."""

from pydantic import BaseModel

from forum.config import PortfolioSettings
from forum.domain.service import PortfolioService, VoteService
from forum.domain.value import Identity, PortfolioCategory, PortfolioSort, TargetType

from .get_portfolio import PortfolioItem, portfolio_item


class ListPortfoliosRequest(BaseModel):
    """List portfolios request."""

    category: PortfolioCategory | None = None
    sort: PortfolioSort = PortfolioSort.HOT
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size
    identity: Identity


class ListPortfoliosResponse(BaseModel):
    """List portfolios response."""

    portfolios: list[PortfolioItem]
    page: int
    limit: int
    total_pages: int
    total_count: int
    has_next_page: bool


class ListPortfoliosUseCase:
    """Use case for browsing the approved portfolio feed."""

    def __init__(
        self,
        portfolio_service: PortfolioService,
        vote_service: VoteService,
        settings: PortfolioSettings,
    ) -> None:
        """Initialize list portfolios use case.

        Args:
            portfolio_service: Portfolio domain service
            vote_service: Vote service for the viewer's votes
            settings: Feed page size limits
        """
        self.portfolio_service = portfolio_service
        self.vote_service = vote_service
        self.settings = settings

    async def execute(self, request: ListPortfoliosRequest) -> ListPortfoliosResponse:
        """Execute list portfolios flow.

        Page sizes above the configured maximum are capped.

        Raises:
            ValidationError: If page or limit is not positive
        """
        limit = min(
            request.limit or self.settings.default_page_size,
            self.settings.max_page_size,
        )
        page = await self.portfolio_service.list_portfolios(
            category=request.category,
            sort=request.sort,
            page=request.page,
            limit=limit,
        )

        votes = await self.vote_service.get_viewer_votes(
            identity=request.identity,
            target_type=TargetType.PORTFOLIO,
            target_ids=[post.id for post in page.posts],
        )

        return ListPortfoliosResponse(
            portfolios=[portfolio_item(post, votes.get(post.id)) for post in page.posts],
            page=page.page,
            limit=limit,
            total_pages=page.total_pages,
            total_count=page.total_count,
            has_next_page=page.has_next_page,
        )
