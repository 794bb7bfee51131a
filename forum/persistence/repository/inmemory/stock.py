"""In-memory stock repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from forum.domain.model.stock import Stock
from forum.domain.repository.stock import StockRepository
from forum.domain.value import StockId

from .store import InMemoryStore

EDITABLE_FIELDS = (
    "symbol",
    "name",
    "description",
    "exchange",
    "currency",
    "current_price",
    "previous_close",
    "percent_change",
)


class InMemoryStockRepository(StockRepository):
    """In-memory implementation of StockRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, stock_id: StockId) -> Optional[Stock]:
        """Find a stock by ID."""
        return self._store.stocks.get(stock_id)

    async def find_by_symbol(self, symbol: str) -> Optional[Stock]:
        """Find a stock by its ticker symbol."""
        wanted = symbol.strip().upper()
        for stock in self._store.stocks.values():
            if stock.symbol == wanted:
                return stock
        return None

    async def search(self, query: Optional[str] = None, limit: int = 100) -> list[Stock]:
        """List stocks, most commented first."""
        stocks = list(self._store.stocks.values())

        if query:
            needle = query.strip().lower()
            stocks = [
                s
                for s in stocks
                if needle in s.symbol.lower() or needle in s.name.lower()
            ]

        stocks.sort(key=lambda s: (-s.comment_count, s.symbol))
        return stocks[:limit]

    async def save(self, stock: Stock) -> Stock:
        """Save a new stock.

        Raises:
            IntegrityError: If the symbol is already taken
        """
        if await self.find_by_symbol(stock.symbol):
            raise IntegrityError("Duplicate symbol", None, Exception())

        self._store.stocks[stock.id] = stock
        return stock

    async def update(self, stock: Stock) -> Stock:
        """Persist the descriptive and market fields of an existing stock."""
        current = self._store.stocks.get(stock.id)
        if current is None:
            return stock

        changes = {name: getattr(stock, name) for name in EDITABLE_FIELDS}
        changes["updated_at"] = datetime.now()
        updated = current.model_copy(update=changes)
        self._store.stocks[stock.id] = updated
        return updated

    async def delete(self, stock_id: StockId) -> None:
        """Delete a stock."""
        self._store.stocks.pop(stock_id, None)
