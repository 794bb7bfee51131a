"""Unit tests for CommentAggregateService."""

import pytest

from forum.domain.repository import (
    CommentRepository,
    ConversationRepository,
    StockRepository,
)
from forum.domain.service import CommentAggregateService
from forum.domain.service.aggregate_service import make_excerpt
from forum.domain.value import EXCERPT_LIMIT, TargetRef, TargetType
from tests.conftest import make_comment, make_conversation, make_stock, make_user, stock_ref
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestMakeExcerpt:
    """Tests for make_excerpt."""

    def test_short_content_is_kept(self):
        """Content within the limit is unchanged."""
        assert make_excerpt("Buy the dip") == "Buy the dip"

    def test_long_content_is_truncated_with_ellipsis(self):
        """Content over the limit is cut to fit, ellipsis included."""
        # Act
        excerpt = make_excerpt("x" * (EXCERPT_LIMIT + 50))

        # Assert
        assert len(excerpt) == EXCERPT_LIMIT
        assert excerpt.endswith("...")

    def test_content_at_limit_is_kept(self):
        """Exactly EXCERPT_LIMIT characters is not truncated."""
        content = "y" * EXCERPT_LIMIT
        assert make_excerpt(content) == content


class TestCommentAggregates:
    """Tests for on_comment_created and on_comment_deleted."""

    @pytest.mark.asyncio
    async def test_created_comment_becomes_last_comment(self, unit_env):
        """A new comment bumps the count and replaces the snapshot."""
        # Arrange
        aggregate_service = await unit_env.get(CommentAggregateService)
        stock_repo = await unit_env.get(StockRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        stock = await stock_repo.save(make_stock())
        comment = await comment_repo.save(
            make_comment(stock_ref(stock), author=author, content="First!")
        )

        # Act
        count = await aggregate_service.on_comment_created(comment)

        # Assert
        assert count == 1
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.comment_count == 1
        assert updated.last_comment.comment_id == comment.id
        assert updated.last_comment.content == "First!"
        assert updated.last_comment.author == "trader_joe"
        assert updated.last_comment.author_id == author.id

    @pytest.mark.asyncio
    async def test_deleting_last_comment_promotes_newest_survivor(self, unit_env):
        """When the last comment goes, the next newest takes its place."""
        # Arrange
        aggregate_service = await unit_env.get(CommentAggregateService)
        conversation_repo = await unit_env.get(ConversationRepository)
        comment_repo = await unit_env.get(CommentRepository)
        conversation = await conversation_repo.save(make_conversation())
        parent = TargetRef(target_type=TargetType.CONVERSATION, target_id=conversation.id)

        older = await comment_repo.save(make_comment(parent, minutes=1, content="Older"))
        newer = await comment_repo.save(make_comment(parent, minutes=2, content="Newer"))
        await aggregate_service.on_comment_created(older)
        await aggregate_service.on_comment_created(newer)

        # Act
        await comment_repo.delete(newer.id)
        count = await aggregate_service.on_comment_deleted(newer)

        # Assert
        assert count == 1
        updated = await conversation_repo.find_by_id(conversation.id)
        assert updated.last_comment.comment_id == older.id
        assert updated.last_comment.content == "Older"

    @pytest.mark.asyncio
    async def test_deleting_only_comment_clears_snapshot(self, unit_env):
        """With no survivors the snapshot is cleared and the count is zero."""
        # Arrange
        aggregate_service = await unit_env.get(CommentAggregateService)
        stock_repo = await unit_env.get(StockRepository)
        comment_repo = await unit_env.get(CommentRepository)
        stock = await stock_repo.save(make_stock())
        comment = await comment_repo.save(make_comment(stock_ref(stock)))
        await aggregate_service.on_comment_created(comment)

        # Act
        await comment_repo.delete(comment.id)
        count = await aggregate_service.on_comment_deleted(comment)

        # Assert
        assert count == 0
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.last_comment is None

    @pytest.mark.asyncio
    async def test_deleting_older_comment_keeps_snapshot(self, unit_env):
        """Deleting a comment that is not the last one leaves the snapshot alone."""
        # Arrange
        aggregate_service = await unit_env.get(CommentAggregateService)
        stock_repo = await unit_env.get(StockRepository)
        comment_repo = await unit_env.get(CommentRepository)
        stock = await stock_repo.save(make_stock())
        older = await comment_repo.save(make_comment(stock_ref(stock), minutes=1))
        newer = await comment_repo.save(make_comment(stock_ref(stock), minutes=2))
        await aggregate_service.on_comment_created(older)
        await aggregate_service.on_comment_created(newer)

        # Act
        await comment_repo.delete(older.id)
        await aggregate_service.on_comment_deleted(older)

        # Assert
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.comment_count == 1
        assert updated.last_comment.comment_id == newer.id

    @pytest.mark.asyncio
    async def test_count_never_goes_below_zero(self, unit_env):
        """A stray delete on an uncounted parent floors at zero."""
        # Arrange
        aggregate_service = await unit_env.get(CommentAggregateService)
        stock_repo = await unit_env.get(StockRepository)
        stock = await stock_repo.save(make_stock())
        comment = make_comment(stock_ref(stock))

        # Act
        count = await aggregate_service.on_comment_deleted(comment)

        # Assert
        assert count == 0

    @pytest.mark.asyncio
    async def test_reset_all_clears_every_content_row(self, unit_env):
        """reset_all zeroes counts and snapshots on all content."""
        # Arrange
        aggregate_service = await unit_env.get(CommentAggregateService)
        stock_repo = await unit_env.get(StockRepository)
        conversation_repo = await unit_env.get(ConversationRepository)
        comment_repo = await unit_env.get(CommentRepository)
        stock = await stock_repo.save(make_stock())
        await conversation_repo.save(make_conversation())
        comment = await comment_repo.save(make_comment(stock_ref(stock)))
        await aggregate_service.on_comment_created(comment)

        # Act
        touched = await aggregate_service.reset_all()

        # Assert
        assert touched == 2
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.comment_count == 0
        assert updated.last_comment is None

    @pytest.mark.asyncio
    async def test_older_comment_arriving_late_keeps_newer_snapshot(self, unit_env):
        """Out-of-order creates still leave the newest comment in the snapshot."""
        # Arrange
        aggregate_service = await unit_env.get(CommentAggregateService)
        stock_repo = await unit_env.get(StockRepository)
        comment_repo = await unit_env.get(CommentRepository)
        stock = await stock_repo.save(make_stock())
        older = await comment_repo.save(
            make_comment(stock_ref(stock), minutes=1, content="Older")
        )
        newer = await comment_repo.save(
            make_comment(stock_ref(stock), minutes=2, content="Newer")
        )

        # Act
        await aggregate_service.on_comment_created(newer)
        count = await aggregate_service.on_comment_created(older)

        # Assert
        assert count == 2
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.last_comment.comment_id == newer.id
        assert updated.last_comment.content == "Newer"
