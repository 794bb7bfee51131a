"""PostgreSQL implementation of Portfolio repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import PortfolioPost
from forum.domain.repository import PortfolioRepository
from forum.domain.value import PortfolioCategory, PortfolioId, PortfolioSort
from forum.persistence.mappers import portfolio_to_dict, row_to_portfolio
from forum.persistence.tables import portfolio_posts_table


class PostgresPortfolioRepository(PortfolioRepository):
    """PostgreSQL implementation of PortfolioRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[PortfolioPost]:
        """Find a portfolio post by ID."""
        stmt = select(portfolio_posts_table).where(
            portfolio_posts_table.c.id == portfolio_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_portfolio(row._asdict()) if row else None

    async def find_page(
        self,
        category: Optional[PortfolioCategory],
        sort: PortfolioSort,
        limit: int,
        offset: int,
    ) -> List[PortfolioPost]:
        """List approved portfolio posts."""
        t = portfolio_posts_table
        stmt = select(t).where(t.c.is_approved.is_(True))

        if category is not None:
            stmt = stmt.where(t.c.category == category.value)

        # Sort order
        if sort == PortfolioSort.NEW:
            stmt = stmt.order_by(desc(t.c.created_at))
        elif sort == PortfolioSort.TOP:
            stmt = stmt.order_by(desc(t.c.upvotes), desc(t.c.created_at))
        elif sort == PortfolioSort.CONTROVERSIAL:
            stmt = stmt.order_by(
                desc(t.c.downvotes), desc(t.c.upvotes), desc(t.c.created_at)
            )
        else:
            stmt = stmt.order_by(
                desc(t.c.upvotes), desc(t.c.comment_count), desc(t.c.created_at)
            )

        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [row_to_portfolio(row._asdict()) for row in result.fetchall()]

    async def count(self, category: Optional[PortfolioCategory]) -> int:
        """Count approved portfolio posts, optionally within one category."""
        t = portfolio_posts_table
        stmt = select(func.count()).select_from(t).where(t.c.is_approved.is_(True))
        if category is not None:
            stmt = stmt.where(t.c.category == category.value)

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: PortfolioPost) -> PortfolioPost:
        """Insert a new portfolio post."""
        stmt = insert(portfolio_posts_table).values(**portfolio_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, portfolio_id: PortfolioId) -> None:
        """Delete a portfolio post."""
        stmt = delete(portfolio_posts_table).where(
            portfolio_posts_table.c.id == portfolio_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
