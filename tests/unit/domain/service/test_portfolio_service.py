"""Unit tests for PortfolioService."""

from uuid import uuid4

import pytest

from forum.domain.error import ForbiddenError, ValidationError
from forum.domain.repository import PortfolioRepository
from forum.domain.service import PortfolioService
from forum.domain.value import PortfolioCategory, PortfolioSort, UserId
from tests.conftest import at, make_portfolio, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPortfolios:
    """Tests for list_portfolios method."""

    @pytest.mark.asyncio
    async def test_pagination_metadata(self, unit_env):
        """Pages report totals and whether another page follows."""
        # Arrange
        portfolio_service = await unit_env.get(PortfolioService)
        portfolio_repo = await unit_env.get(PortfolioRepository)
        author = make_user()
        for minute in range(5):
            await portfolio_repo.save(make_portfolio(author, created_at=at(minute)))

        # Act
        first = await portfolio_service.list_portfolios(None, PortfolioSort.NEW, 1, 2)
        last = await portfolio_service.list_portfolios(None, PortfolioSort.NEW, 3, 2)

        # Assert
        assert len(first.posts) == 2
        assert first.total_count == 5
        assert first.total_pages == 3
        assert first.has_next_page is True
        assert first.posts[0].created_at == at(4)

        assert len(last.posts) == 1
        assert last.has_next_page is False

    @pytest.mark.asyncio
    async def test_category_filter_and_unapproved_hidden(self, unit_env):
        """Only approved posts in the requested category are listed."""
        # Arrange
        portfolio_service = await unit_env.get(PortfolioService)
        portfolio_repo = await unit_env.get(PortfolioRepository)
        author = make_user()
        gains = await portfolio_repo.save(
            make_portfolio(author, category=PortfolioCategory.GAINS)
        )
        await portfolio_repo.save(make_portfolio(author))
        await portfolio_repo.save(
            make_portfolio(author, category=PortfolioCategory.GAINS, is_approved=False)
        )

        # Act
        page = await portfolio_service.list_portfolios(
            PortfolioCategory.GAINS, PortfolioSort.HOT, 1, 10
        )

        # Assert
        assert [p.id for p in page.posts] == [gains.id]
        assert page.total_count == 1

    @pytest.mark.asyncio
    async def test_top_sort_orders_by_upvotes(self, unit_env):
        """The top feed puts the most upvoted post first."""
        # Arrange
        portfolio_service = await unit_env.get(PortfolioService)
        portfolio_repo = await unit_env.get(PortfolioRepository)
        author = make_user()
        await portfolio_repo.save(make_portfolio(author, upvotes=1, created_at=at(9)))
        best = await portfolio_repo.save(make_portfolio(author, upvotes=7))

        # Act
        page = await portfolio_service.list_portfolios(None, PortfolioSort.TOP, 1, 10)

        # Assert
        assert page.posts[0].id == best.id

    @pytest.mark.asyncio
    async def test_empty_feed_has_zero_pages(self, unit_env):
        """No posts means no pages and no next page."""
        # Arrange
        portfolio_service = await unit_env.get(PortfolioService)

        # Act
        page = await portfolio_service.list_portfolios(None, PortfolioSort.HOT, 1, 10)

        # Assert
        assert page.posts == []
        assert page.total_pages == 0
        assert page.has_next_page is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0)])
    async def test_non_positive_paging_raises_validation_error(self, unit_env, page, limit):
        """Page and limit must both be at least one."""
        # Arrange
        portfolio_service = await unit_env.get(PortfolioService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await portfolio_service.list_portfolios(None, PortfolioSort.HOT, page, limit)


class TestCreateAndDeletePortfolio:
    """Tests for create_portfolio and delete_portfolio."""

    @pytest.mark.asyncio
    async def test_create_requires_title(self, unit_env):
        """A blank title should be rejected."""
        # Arrange
        portfolio_service = await unit_env.get(PortfolioService)

        # Act & Assert
        with pytest.raises(ValidationError, match="title is required"):
            await portfolio_service.create_portfolio(
                title="  ",
                author_id=UserId(uuid4()),
                author_name="trader_joe",
                image_url="https://cdn.example.com/p.png",
            )

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, unit_env):
        """Deleting someone else's post raises ForbiddenError."""
        # Arrange
        portfolio_service = await unit_env.get(PortfolioService)
        author = make_user()
        post = await portfolio_service.create_portfolio(
            title="Dividend ladder",
            author_id=author.id,
            author_name=author.username.root,
            image_url="https://cdn.example.com/p.png",
            category=PortfolioCategory.CRYPTO,
        )

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await portfolio_service.delete_portfolio(post.id, UserId(uuid4()))

        deleted = await portfolio_service.delete_portfolio(post.id, author.id)
        assert deleted.id == post.id
