"""Get stock use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, model_validator

from forum.domain.model import Stock
from forum.domain.service import StockService, VoteService
from forum.domain.value import (
    Identity,
    LastComment,
    StockId,
    TargetRef,
    TargetType,
    VoteDirection,
)


class StockItem(BaseModel):
    """Stock in response."""

    stock_id: str
    symbol: str
    name: str
    description: str | None
    exchange: str | None
    currency: str | None
    current_price: float
    previous_close: float | None
    percent_change: float
    likes: int
    dislikes: int
    comment_count: int
    last_comment: LastComment | None
    created_by: str
    created_at: datetime
    updated_at: datetime
    user_vote: VoteDirection | None = None


def stock_item(stock: Stock, user_vote: VoteDirection | None = None) -> StockItem:
    """Build the response item for a stock."""
    return StockItem(
        stock_id=str(stock.id),
        symbol=stock.symbol,
        name=stock.name,
        description=stock.description,
        exchange=stock.exchange,
        currency=stock.currency,
        current_price=stock.current_price,
        previous_close=stock.previous_close,
        percent_change=stock.percent_change,
        likes=stock.likes,
        dislikes=stock.dislikes,
        comment_count=stock.comment_count,
        last_comment=stock.last_comment,
        created_by=str(stock.created_by),
        created_at=stock.created_at,
        updated_at=stock.updated_at,
        user_vote=user_vote,
    )


class GetStockRequest(BaseModel):
    """Get stock request, by ID or by ticker symbol."""

    stock_id: UUID | None = None
    symbol: str | None = None
    identity: Identity

    @model_validator(mode="after")
    def one_key(self) -> "GetStockRequest":
        if (self.stock_id is None) == (self.symbol is None):
            raise ValueError("Provide exactly one of stock_id or symbol")
        return self


class GetStockUseCase:
    """Use case for getting a single stock with the viewer's vote."""

    def __init__(self, stock_service: StockService, vote_service: VoteService) -> None:
        """Initialize get stock use case.

        Args:
            stock_service: Stock domain service
            vote_service: Vote service for the viewer's vote
        """
        self.stock_service = stock_service
        self.vote_service = vote_service

    async def execute(self, request: GetStockRequest) -> StockItem:
        """Execute get stock flow.

        Raises:
            NotFoundError: If the stock does not exist
        """
        if request.stock_id is not None:
            stock = await self.stock_service.get_stock(StockId(request.stock_id))
        else:
            stock = await self.stock_service.get_stock_by_symbol(request.symbol)

        user_vote = await self.vote_service.get_viewer_vote(
            TargetRef(target_type=TargetType.STOCK, target_id=stock.id),
            request.identity,
        )
        return stock_item(stock, user_vote)
