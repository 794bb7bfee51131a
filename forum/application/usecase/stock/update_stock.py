"""Update stock use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import StockService
from forum.domain.value import StockId

from .get_stock import StockItem, stock_item


class UpdateStockRequest(BaseModel):
    """Update stock request.

    ``changes`` holds only the fields the client sent, so absent fields
    keep their stored values.
    """

    stock_id: UUID
    changes: dict[str, Any]


class UpdateStockUseCase:
    """Use case for merge-patching a stock's descriptive and market fields."""

    def __init__(self, stock_service: StockService) -> None:
        """Initialize update stock use case.

        Args:
            stock_service: Stock domain service
        """
        self.stock_service = stock_service

    async def execute(self, request: UpdateStockRequest) -> StockItem:
        """Execute update stock flow.

        Raises:
            NotFoundError: If the stock does not exist
            ValidationError: If a read-only field is changed
        """
        stock = await self.stock_service.update_stock(
            StockId(request.stock_id), request.changes
        )
        return stock_item(stock)
