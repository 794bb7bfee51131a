"""List stocks use case."""

from pydantic import BaseModel

from forum.domain.service import StockService, VoteService
from forum.domain.value import Identity, TargetType

from .get_stock import StockItem, stock_item


class ListStocksRequest(BaseModel):
    """List stocks request."""

    search: str | None = None  # Fragment of symbol or name
    identity: Identity


class ListStocksResponse(BaseModel):
    """List stocks response."""

    stocks: list[StockItem]
    total: int


class ListStocksUseCase:
    """Use case for listing stocks, most discussed first."""

    def __init__(self, stock_service: StockService, vote_service: VoteService) -> None:
        """Initialize list stocks use case.

        Args:
            stock_service: Stock domain service
            vote_service: Vote service for the viewer's votes
        """
        self.stock_service = stock_service
        self.vote_service = vote_service

    async def execute(self, request: ListStocksRequest) -> ListStocksResponse:
        """Execute list stocks flow."""
        stocks = await self.stock_service.search_stocks(request.search)

        # Batch query for the viewer's votes
        votes = await self.vote_service.get_viewer_votes(
            identity=request.identity,
            target_type=TargetType.STOCK,
            target_ids=[stock.id for stock in stocks],
        )

        items = [stock_item(stock, votes.get(stock.id)) for stock in stocks]
        return ListStocksResponse(stocks=items, total=len(items))
