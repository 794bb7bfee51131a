"""In-memory portfolio repository for testing."""

from typing import Optional

from forum.domain.model.portfolio import PortfolioPost
from forum.domain.repository.portfolio import PortfolioRepository
from forum.domain.value import PortfolioCategory, PortfolioId, PortfolioSort

from .store import InMemoryStore


def _sort_key(sort: PortfolioSort):
    if sort == PortfolioSort.NEW:
        return lambda p: (p.created_at,)
    if sort == PortfolioSort.TOP:
        return lambda p: (p.upvotes, p.created_at)
    if sort == PortfolioSort.CONTROVERSIAL:
        return lambda p: (p.downvotes, p.upvotes, p.created_at)
    return lambda p: (p.upvotes, p.comment_count, p.created_at)


class InMemoryPortfolioRepository(PortfolioRepository):
    """In-memory implementation of PortfolioRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[PortfolioPost]:
        """Find a portfolio post by ID."""
        return self._store.portfolios.get(portfolio_id)

    async def find_page(
        self,
        category: Optional[PortfolioCategory],
        sort: PortfolioSort,
        limit: int,
        offset: int,
    ) -> list[PortfolioPost]:
        """List approved portfolio posts."""
        posts = self._approved(category)
        posts.sort(key=_sort_key(sort), reverse=True)
        return posts[offset : offset + limit]

    async def count(self, category: Optional[PortfolioCategory]) -> int:
        """Count approved portfolio posts."""
        return len(self._approved(category))

    async def save(self, post: PortfolioPost) -> PortfolioPost:
        """Save a portfolio post."""
        self._store.portfolios[post.id] = post
        return post

    async def delete(self, portfolio_id: PortfolioId) -> None:
        """Delete a portfolio post."""
        self._store.portfolios.pop(portfolio_id, None)

    def _approved(self, category: Optional[PortfolioCategory]) -> list[PortfolioPost]:
        return [
            p
            for p in self._store.portfolios.values()
            if p.is_approved and (category is None or p.category == category)
        ]
