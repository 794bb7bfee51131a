"""Stock domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.model.stock import Stock
from forum.domain.repository import StockRepository
from forum.domain.value import StockId, UserId

from .base import Service

# Fields a merge-patch update may touch
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "exchange",
        "currency",
        "current_price",
        "previous_close",
        "percent_change",
    }
)


class StockService(Service):
    """Domain service for stock listings."""

    def __init__(self, stock_repository: StockRepository) -> None:
        """Initialize stock service.

        Args:
            stock_repository: Stock repository
        """
        self.stock_repository = stock_repository

    async def create_stock(
        self,
        symbol: str,
        name: str,
        current_price: float,
        percent_change: float,
        created_by: UserId,
        description: str | None = None,
        exchange: str | None = None,
        currency: str | None = None,
        previous_close: float | None = None,
    ) -> Stock:
        """Create a stock listing.

        Raises:
            ValidationError: If the symbol is already listed
        """
        with logfire.span("stock_service.create_stock", symbol=symbol):
            now = datetime.now()
            stock = Stock(
                id=StockId(uuid4()),
                symbol=symbol,
                name=name.strip(),
                description=description,
                exchange=exchange,
                currency=currency,
                current_price=current_price,
                previous_close=previous_close,
                percent_change=percent_change,
                created_by=created_by,
                created_at=now,
                updated_at=now,
            )

            if await self.stock_repository.find_by_symbol(stock.symbol):
                logfire.warn("Duplicate stock symbol", symbol=stock.symbol)
                raise ValidationError(f"Stock with symbol {stock.symbol} already exists")

            saved = await self.stock_repository.save(stock)
            logfire.info("Stock created", stock_id=str(saved.id), symbol=saved.symbol)
            return saved

    async def get_stock(self, stock_id: StockId) -> Stock:
        """Get a stock by ID.

        Raises:
            NotFoundError: If the stock does not exist
        """
        stock = await self.stock_repository.find_by_id(stock_id)
        if stock is None:
            raise NotFoundError("Stock", str(stock_id))
        return stock

    async def get_stock_by_symbol(self, symbol: str) -> Stock:
        """Get a stock by ticker symbol (case-insensitive).

        Raises:
            NotFoundError: If no stock has this symbol
        """
        stock = await self.stock_repository.find_by_symbol(symbol.strip().upper())
        if stock is None:
            raise NotFoundError("Stock", symbol)
        return stock

    async def search_stocks(self, query: str | None = None) -> list[Stock]:
        """List stocks matching a symbol/name fragment, most commented first."""
        with logfire.span("stock_service.search_stocks", query=query):
            stocks = await self.stock_repository.search(query.strip() if query else None)
            logfire.info("Stocks listed", query=query, count=len(stocks))
            return stocks

    async def update_stock(self, stock_id: StockId, changes: dict[str, Any]) -> Stock:
        """Apply a merge-patch to a stock's descriptive and market fields.

        Keys absent from ``changes`` are left unchanged.

        Raises:
            NotFoundError: If the stock does not exist
            ValidationError: If ``changes`` touches a read-only field
        """
        with logfire.span(
            "stock_service.update_stock", stock_id=str(stock_id), fields=sorted(changes)
        ):
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

            stock = await self.get_stock(stock_id)
            updated = Stock.model_validate(
                {**stock.model_dump(), **changes, "updated_at": datetime.now()}
            )
            saved = await self.stock_repository.update(updated)
            logfire.info("Stock updated", stock_id=str(stock_id))
            return saved

    async def delete_stock(self, stock_id: StockId, user_id: UserId) -> Stock:
        """Delete a stock listed by the caller.

        Raises:
            NotFoundError: If the stock does not exist
            ForbiddenError: If the caller did not create the stock
        """
        with logfire.span("stock_service.delete_stock", stock_id=str(stock_id)):
            stock = await self.get_stock(stock_id)
            if stock.created_by != user_id:
                logfire.warn(
                    "Stock deletion refused", stock_id=str(stock_id), user_id=str(user_id)
                )
                raise ForbiddenError("stock", str(stock_id), f"user:{user_id}")

            await self.stock_repository.delete(stock_id)
            logfire.info("Stock deleted", stock_id=str(stock_id), symbol=stock.symbol)
            return stock
