"""Create stock use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import StockService
from forum.domain.value import UserId

from .get_stock import StockItem, stock_item


class CreateStockRequest(BaseModel):
    """Create stock request."""

    symbol: str
    name: str
    current_price: float
    percent_change: float = 0.0
    description: str | None = None
    exchange: str | None = None
    currency: str | None = None
    previous_close: float | None = None
    user_id: UUID  # Authenticated creator


class CreateStockUseCase:
    """Use case for listing a new stock."""

    def __init__(self, stock_service: StockService) -> None:
        """Initialize create stock use case.

        Args:
            stock_service: Stock domain service
        """
        self.stock_service = stock_service

    async def execute(self, request: CreateStockRequest) -> StockItem:
        """Execute create stock flow.

        Raises:
            ValidationError: If the symbol is already listed
        """
        stock = await self.stock_service.create_stock(
            symbol=request.symbol,
            name=request.name,
            current_price=request.current_price,
            percent_change=request.percent_change,
            created_by=UserId(request.user_id),
            description=request.description,
            exchange=request.exchange,
            currency=request.currency,
            previous_close=request.previous_close,
        )
        return stock_item(stock)
