"""Stock repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.stock import Stock
from forum.domain.value import StockId


class StockRepository(ABC):
    """Repository for Stock aggregate."""

    @abstractmethod
    async def find_by_id(self, stock_id: StockId) -> Optional[Stock]:
        """Find a stock by ID."""
        pass

    @abstractmethod
    async def find_by_symbol(self, symbol: str) -> Optional[Stock]:
        """Find a stock by its (upper-cased) ticker symbol."""
        pass

    @abstractmethod
    async def search(self, query: Optional[str] = None, limit: int = 100) -> List[Stock]:
        """List stocks, most commented first.

        Args:
            query: Case-insensitive substring of the symbol or name
            limit: Maximum number of stocks to return

        Returns:
            Matching stocks
        """
        pass

    @abstractmethod
    async def save(self, stock: Stock) -> Stock:
        """Insert a new stock.

        Raises:
            IntegrityError: If the symbol is already taken
        """
        pass

    @abstractmethod
    async def update(self, stock: Stock) -> Stock:
        """Persist the descriptive and market fields of an existing stock.

        Counters and comment aggregates are not written.
        """
        pass

    @abstractmethod
    async def delete(self, stock_id: StockId) -> None:
        """Delete a stock."""
        pass
