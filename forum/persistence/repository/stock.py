"""PostgreSQL implementation of Stock repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, desc, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Stock
from forum.domain.repository import StockRepository
from forum.domain.value import StockId
from forum.persistence.mappers import row_to_stock, stock_to_dict
from forum.persistence.tables import stocks_table

# Columns written by update(); counters and aggregates have their own writers
EDITABLE_COLUMNS = (
    "symbol",
    "name",
    "description",
    "exchange",
    "currency",
    "current_price",
    "previous_close",
    "percent_change",
)


class PostgresStockRepository(StockRepository):
    """PostgreSQL implementation of StockRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, stock_id: StockId) -> Optional[Stock]:
        """Find a stock by ID."""
        stmt = select(stocks_table).where(stocks_table.c.id == stock_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_stock(row._asdict()) if row else None

    async def find_by_symbol(self, symbol: str) -> Optional[Stock]:
        """Find a stock by its ticker symbol."""
        stmt = select(stocks_table).where(
            stocks_table.c.symbol == symbol.strip().upper()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_stock(row._asdict()) if row else None

    async def search(self, query: Optional[str] = None, limit: int = 100) -> List[Stock]:
        """List stocks, most commented first."""
        stmt = select(stocks_table)

        if query:
            pattern = f"%{query.strip()}%"
            stmt = stmt.where(
                or_(
                    stocks_table.c.symbol.ilike(pattern),
                    stocks_table.c.name.ilike(pattern),
                )
            )

        stmt = stmt.order_by(
            desc(stocks_table.c.comment_count), stocks_table.c.symbol
        ).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_stock(row._asdict()) for row in result.fetchall()]

    async def save(self, stock: Stock) -> Stock:
        """Insert a new stock."""
        stmt = insert(stocks_table).values(**stock_to_dict(stock))
        await self.session.execute(stmt)
        await self.session.flush()
        return stock

    async def update(self, stock: Stock) -> Stock:
        """Persist the descriptive and market fields of an existing stock."""
        stock_dict = stock_to_dict(stock)
        values = {column: stock_dict[column] for column in EDITABLE_COLUMNS}
        values["updated_at"] = datetime.now()

        stmt = (
            update(stocks_table)
            .where(stocks_table.c.id == stock.id)
            .values(**values)
            .returning(stocks_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_stock(row._asdict()) if row else stock

    async def delete(self, stock_id: StockId) -> None:
        """Delete a stock."""
        stmt = delete(stocks_table).where(stocks_table.c.id == stock_id)
        await self.session.execute(stmt)
        await self.session.flush()
