"""Unit tests for StockService."""

from uuid import uuid4

import pytest

from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.repository import StockRepository
from forum.domain.service import StockService
from forum.domain.value import StockId, UserId
from tests.conftest import make_stock
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateStock:
    """Tests for create_stock method."""

    @pytest.mark.asyncio
    async def test_create_normalizes_symbol(self, unit_env):
        """Symbols are stored upper-cased and trimmed."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        creator = UserId(uuid4())

        # Act
        stock = await stock_service.create_stock(
            symbol=" acme ",
            name="Acme Corp",
            current_price=12.5,
            percent_change=-0.4,
            created_by=creator,
        )

        # Assert
        assert stock.symbol == "ACME"
        assert stock.created_by == creator
        assert stock.likes == 0
        assert stock.comment_count == 0

    @pytest.mark.asyncio
    async def test_duplicate_symbol_raises_validation_error(self, unit_env):
        """A second listing of the same symbol should be rejected."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        stock_repo = await unit_env.get(StockRepository)
        await stock_repo.save(make_stock("ACME"))

        # Act & Assert
        with pytest.raises(ValidationError, match="Stock with symbol ACME already exists"):
            await stock_service.create_stock(
                symbol="acme",
                name="Acme Again",
                current_price=1.0,
                percent_change=0.0,
                created_by=UserId(uuid4()),
            )


class TestGetStock:
    """Tests for lookups and search."""

    @pytest.mark.asyncio
    async def test_symbol_lookup_is_case_insensitive(self, unit_env):
        """Looking up by symbol ignores case."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        stock_repo = await unit_env.get(StockRepository)
        stock = await stock_repo.save(make_stock("ACME"))

        # Act
        found = await stock_service.get_stock_by_symbol("acme")

        # Assert
        assert found.id == stock.id

    @pytest.mark.asyncio
    async def test_missing_stock_raises_not_found(self, unit_env):
        """An unknown id should raise NotFoundError."""
        # Arrange
        stock_service = await unit_env.get(StockService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Stock not found"):
            await stock_service.get_stock(StockId(uuid4()))

    @pytest.mark.asyncio
    async def test_search_matches_symbol_or_name_most_commented_first(self, unit_env):
        """Search filters by fragment and orders by comment count."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        stock_repo = await unit_env.get(StockRepository)
        quiet = await stock_repo.save(make_stock("ACMQ", name="Acme Quiet"))
        busy = await stock_repo.save(make_stock("ACMB", name="Acme Busy", comment_count=5))
        await stock_repo.save(make_stock("ZZZ", name="Other"))

        # Act
        stocks = await stock_service.search_stocks("acm")

        # Assert
        assert [s.id for s in stocks] == [busy.id, quiet.id]


class TestUpdateStock:
    """Tests for update_stock method."""

    @pytest.mark.asyncio
    async def test_merge_patch_leaves_absent_fields_unchanged(self, unit_env):
        """Only the supplied fields change."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        stock_repo = await unit_env.get(StockRepository)
        stock = await stock_repo.save(make_stock(description="Widgets"))

        # Act
        updated = await stock_service.update_stock(stock.id, {"current_price": 120.0})

        # Assert
        assert updated.current_price == 120.0
        assert updated.description == "Widgets"
        assert updated.name == stock.name

    @pytest.mark.asyncio
    async def test_read_only_field_raises_validation_error(self, unit_env):
        """Counters cannot be patched directly."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        stock_repo = await unit_env.get(StockRepository)
        stock = await stock_repo.save(make_stock())

        # Act & Assert
        with pytest.raises(ValidationError, match="likes"):
            await stock_service.update_stock(stock.id, {"likes": 1000})


class TestDeleteStock:
    """Tests for delete_stock method."""

    @pytest.mark.asyncio
    async def test_creator_can_delete(self, unit_env):
        """The user who listed a stock can delete it."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        stock_repo = await unit_env.get(StockRepository)
        creator = UserId(uuid4())
        stock = await stock_repo.save(make_stock(created_by=creator))

        # Act
        await stock_service.delete_stock(stock.id, creator)

        # Assert
        assert await stock_repo.find_by_id(stock.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Anyone else gets ForbiddenError and the stock survives."""
        # Arrange
        stock_service = await unit_env.get(StockService)
        stock_repo = await unit_env.get(StockRepository)
        stock = await stock_repo.save(make_stock())

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await stock_service.delete_stock(stock.id, UserId(uuid4()))

        assert await stock_repo.find_by_id(stock.id) is not None
