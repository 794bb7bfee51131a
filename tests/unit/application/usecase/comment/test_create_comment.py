"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import StockRepository, UserRepository
from forum.domain.value import ANONYMOUS_LABEL, Identity, TargetType, UserId
from tests.conftest import make_stock, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_comment_then_authenticated_reply(self, unit_env):
        """Both comments count towards the stock and the reply becomes the last comment."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        stock_repo = await unit_env.get(StockRepository)
        user_repo = await unit_env.get(UserRepository)
        stock = await stock_repo.save(make_stock())
        user = await user_repo.save(make_user())

        # Act
        first = await use_case.execute(
            CreateCommentRequest(
                parent_type=TargetType.STOCK,
                parent_id=stock.id,
                content="Anyone holding through earnings?",
                identity=Identity.anonymous("session-1"),
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                parent_type=TargetType.STOCK,
                parent_id=stock.id,
                content="Holding, yes.",
                identity=Identity.authenticated(user.id),
                parent_comment_id=first.comment.comment_id,
            )
        )

        # Assert
        assert first.comment_count == 1
        assert first.comment.author_name == ANONYMOUS_LABEL
        assert reply.comment_count == 2
        assert reply.comment.is_reply is True
        assert reply.comment.parent_comment_id == first.comment.comment_id
        assert reply.comment.author_name == "trader_joe"

        updated = await stock_repo.find_by_id(stock.id)
        assert updated.comment_count == 2
        assert str(updated.last_comment.comment_id) == reply.comment.comment_id

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        """A token for a user that no longer exists should raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        stock_repo = await unit_env.get(StockRepository)
        stock = await stock_repo.save(make_stock())

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(
                CreateCommentRequest(
                    parent_type=TargetType.STOCK,
                    parent_id=stock.id,
                    content="Ghost comment",
                    identity=Identity.authenticated(UserId(uuid4())),
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_flag_skips_author_lookup(self, unit_env):
        """Posting anonymously never needs the author's profile."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        stock_repo = await unit_env.get(StockRepository)
        stock = await stock_repo.save(make_stock())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                parent_type=TargetType.STOCK,
                parent_id=stock.id,
                content="No names",
                identity=Identity.authenticated(UserId(uuid4())),
                anonymous=True,
            )
        )

        # Assert
        assert response.comment.is_anonymous is True
        assert response.comment.author_id is None
