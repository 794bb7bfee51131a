"""Portfolio repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.portfolio import PortfolioPost
from forum.domain.value import PortfolioCategory, PortfolioId, PortfolioSort


class PortfolioRepository(ABC):
    """Repository for PortfolioPost aggregate."""

    @abstractmethod
    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[PortfolioPost]:
        """Find a portfolio post by ID."""
        pass

    @abstractmethod
    async def find_page(
        self,
        category: Optional[PortfolioCategory],
        sort: PortfolioSort,
        limit: int,
        offset: int,
    ) -> List[PortfolioPost]:
        """List approved portfolio posts.

        Sort orders:
        - hot: upvotes, then comment count, then newest
        - new: newest first
        - top: upvotes
        - controversial: downvotes, then upvotes

        Args:
            category: Restrict to one category (None for all)
            sort: Feed ordering
            limit: Page size
            offset: Number of posts to skip

        Returns:
            One page of posts
        """
        pass

    @abstractmethod
    async def count(self, category: Optional[PortfolioCategory]) -> int:
        """Count approved portfolio posts, optionally within one category."""
        pass

    @abstractmethod
    async def save(self, post: PortfolioPost) -> PortfolioPost:
        """Insert a new portfolio post."""
        pass

    @abstractmethod
    async def delete(self, portfolio_id: PortfolioId) -> None:
        """Delete a portfolio post."""
        pass
