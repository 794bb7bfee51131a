"""Unit tests for DeleteStockUseCase."""

import pytest

from forum.application.usecase.stock import DeleteStockRequest, DeleteStockUseCase
from forum.domain.repository import CommentRepository, StockRepository, VoteRepository
from forum.domain.service import VoteService
from forum.domain.value import Identity, TargetRef, TargetType, VoteDirection
from tests.conftest import make_comment, make_stock, make_user, stock_ref
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteStockUseCase:
    """Tests for DeleteStockUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_discussion_and_votes(self, unit_env):
        """Comments on the stock and every related vote go with it."""
        # Arrange
        use_case = await unit_env.get(DeleteStockUseCase)
        vote_service = await unit_env.get(VoteService)
        stock_repo = await unit_env.get(StockRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        creator = make_user()
        stock = await stock_repo.save(make_stock(created_by=creator.id))
        comment = await comment_repo.save(make_comment(stock_ref(stock)))

        voter = Identity.anonymous("voter")
        comment_ref = TargetRef(target_type=TargetType.COMMENT, target_id=comment.id)
        await vote_service.apply_vote(stock_ref(stock), voter, VoteDirection.UP)
        await vote_service.apply_vote(comment_ref, voter, VoteDirection.UP)

        # Act
        response = await use_case.execute(
            DeleteStockRequest(stock_id=stock.id, user_id=creator.id)
        )

        # Assert
        assert response.symbol == "ACME"
        assert response.deleted_comments == 1
        assert await stock_repo.find_by_id(stock.id) is None
        assert await comment_repo.find_by_id(comment.id) is None
        assert await vote_repo.find(stock_ref(stock), voter) is None
        assert await vote_repo.find(comment_ref, voter) is None
