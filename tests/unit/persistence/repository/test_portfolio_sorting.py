"""Unit tests for portfolio feed ordering."""

import pytest

from forum.domain.value import PortfolioSort
from forum.persistence.repository.inmemory import InMemoryPortfolioRepository, InMemoryStore
from tests.conftest import at, make_portfolio, make_user


class TestPortfolioSorting:
    """Unit tests for feed ordering in the in-memory repository."""

    @pytest.mark.asyncio
    async def test_hot_sort_breaks_upvote_ties_by_comments(self):
        """With equal upvotes the more discussed post ranks higher."""
        # Arrange
        repo = InMemoryPortfolioRepository(InMemoryStore())
        author = make_user()
        quiet = await repo.save(make_portfolio(author, upvotes=3, created_at=at(10)))
        busy = await repo.save(make_portfolio(author, upvotes=3, comment_count=4))

        # Act
        posts = await repo.find_page(None, PortfolioSort.HOT, limit=10, offset=0)

        # Assert
        assert [p.id for p in posts] == [busy.id, quiet.id]

    @pytest.mark.asyncio
    async def test_controversial_sort_favors_downvotes(self):
        """The controversial feed puts the most downvoted post first."""
        # Arrange
        repo = InMemoryPortfolioRepository(InMemoryStore())
        author = make_user()
        loved = await repo.save(make_portfolio(author, upvotes=9))
        hated = await repo.save(make_portfolio(author, downvotes=5, upvotes=1))

        # Act
        posts = await repo.find_page(None, PortfolioSort.CONTROVERSIAL, limit=10, offset=0)

        # Assert
        assert [p.id for p in posts] == [hated.id, loved.id]

    @pytest.mark.asyncio
    async def test_offset_and_limit_slice_the_feed(self):
        """Paging slices the ordered feed."""
        # Arrange
        repo = InMemoryPortfolioRepository(InMemoryStore())
        author = make_user()
        saved = [
            await repo.save(make_portfolio(author, created_at=at(minute)))
            for minute in range(4)
        ]

        # Act
        posts = await repo.find_page(None, PortfolioSort.NEW, limit=2, offset=1)

        # Assert
        assert [p.id for p in posts] == [saved[2].id, saved[1].id]
