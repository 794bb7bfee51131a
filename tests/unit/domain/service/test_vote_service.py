"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from forum.domain.error import DuplicateVoteError, NotFoundError, NoVoteFoundError
from forum.domain.repository import PortfolioRepository, StockRepository, VoteRepository
from forum.domain.service import VoteService
from forum.domain.value import Identity, TargetRef, TargetType, UserId, VoteDirection
from tests.conftest import make_portfolio, make_stock, make_user, stock_ref
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _saved_stock(unit_env):
    stock_repo = await unit_env.get(StockRepository)
    stock = await stock_repo.save(make_stock())
    return stock, stock_ref(stock)


class TestApplyVote:
    """Tests for apply_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_records_and_increments(self, unit_env):
        """A first like should be recorded and counted once."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        stock_repo = await unit_env.get(StockRepository)
        stock, target = await _saved_stock(unit_env)
        identity = Identity.authenticated(UserId(uuid4()))

        # Act
        result = await vote_service.apply_vote(target, identity, VoteDirection.UP)

        # Assert
        assert result.direction == VoteDirection.UP
        assert result.tally.up == 1
        assert result.tally.down == 0

        saved_vote = await vote_repo.find(target, identity)
        assert saved_vote is not None
        assert saved_vote.direction == VoteDirection.UP

        updated = await stock_repo.find_by_id(stock.id)
        assert updated.likes == 1

    @pytest.mark.asyncio
    async def test_repeat_vote_raises_duplicate(self, unit_env):
        """Repeating the same vote should be rejected without touching counters."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        stock_repo = await unit_env.get(StockRepository)
        stock, target = await _saved_stock(unit_env)
        identity = Identity.anonymous("session-42")
        await vote_service.apply_vote(target, identity, VoteDirection.UP)

        # Act & Assert
        with pytest.raises(DuplicateVoteError, match="Already voted up"):
            await vote_service.apply_vote(target, identity, VoteDirection.UP)

        updated = await stock_repo.find_by_id(stock.id)
        assert updated.likes == 1

    @pytest.mark.asyncio
    async def test_opposite_vote_switches(self, unit_env):
        """Disliking after liking should move the vote, not add a second one."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        stock, target = await _saved_stock(unit_env)
        identity = Identity.authenticated(UserId(uuid4()))
        await vote_service.apply_vote(target, identity, VoteDirection.UP)

        # Act
        result = await vote_service.apply_vote(target, identity, VoteDirection.DOWN)

        # Assert
        assert result.tally.up == 0
        assert result.tally.down == 1
        assert result.tally.net == -1

        votes = await vote_repo.find_by_voter_and_targets(
            identity, TargetType.STOCK, [stock.id]
        )
        assert len(votes) == 1
        assert votes[0].direction == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_identities_vote_independently(self, unit_env):
        """A user and an anonymous session hold separate votes on one target."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, target = await _saved_stock(unit_env)

        # Act
        await vote_service.apply_vote(
            target, Identity.authenticated(UserId(uuid4())), VoteDirection.UP
        )
        result = await vote_service.apply_vote(
            target, Identity.anonymous("10.0.0.7"), VoteDirection.UP
        )

        # Assert
        assert result.tally.up == 2

    @pytest.mark.asyncio
    async def test_vote_on_missing_target_raises_not_found(self, unit_env):
        """Voting on a target that does not exist should raise NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        target = TargetRef(target_type=TargetType.CONVERSATION, target_id=uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError, match="Conversation not found"):
            await vote_service.apply_vote(
                target, Identity.anonymous("session-1"), VoteDirection.UP
            )

    @pytest.mark.asyncio
    async def test_portfolio_votes_use_upvote_counters(self, unit_env):
        """Portfolio posts count votes as upvotes/downvotes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        portfolio_repo = await unit_env.get(PortfolioRepository)
        post = await portfolio_repo.save(make_portfolio(make_user()))
        target = TargetRef(target_type=TargetType.PORTFOLIO, target_id=post.id)

        # Act
        await vote_service.apply_vote(
            target, Identity.anonymous("session-1"), VoteDirection.DOWN
        )

        # Assert
        updated = await portfolio_repo.find_by_id(post.id)
        assert updated.upvotes == 0
        assert updated.downvotes == 1
        assert updated.net_votes == -1

    @pytest.mark.asyncio
    async def test_concurrent_identical_votes_count_once(self, unit_env):
        """Two simultaneous likes by one identity: one counts, one is a duplicate."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        stock_repo = await unit_env.get(StockRepository)
        stock, target = await _saved_stock(unit_env)
        identity = Identity.anonymous("session-a")

        # Act
        results = await asyncio.gather(
            vote_service.apply_vote(target, identity, VoteDirection.UP),
            vote_service.apply_vote(target, identity, VoteDirection.UP),
            return_exceptions=True,
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], DuplicateVoteError)
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.likes == 1

    @pytest.mark.asyncio
    async def test_concurrent_switches_move_the_vote_once(self, unit_env):
        """Two simultaneous switches to dislike must not count the dislike twice."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        stock_repo = await unit_env.get(StockRepository)
        stock, target = await _saved_stock(unit_env)
        identity = Identity.anonymous("session-a")
        await vote_service.apply_vote(target, identity, VoteDirection.UP)

        # Act
        results = await asyncio.gather(
            vote_service.apply_vote(target, identity, VoteDirection.DOWN),
            vote_service.apply_vote(target, identity, VoteDirection.DOWN),
            return_exceptions=True,
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], DuplicateVoteError)
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.likes == 0
        assert updated.dislikes == 1

    @pytest.mark.asyncio
    async def test_concurrent_votes_from_different_identities_all_count(self, unit_env):
        """Likes from different identities never block each other out."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        stock_repo = await unit_env.get(StockRepository)
        stock, target = await _saved_stock(unit_env)

        # Act
        await asyncio.gather(
            *(
                vote_service.apply_vote(
                    target, Identity.anonymous(f"session-{i}"), VoteDirection.UP
                )
                for i in range(5)
            )
        )

        # Assert
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.likes == 5


class TestRemoveVote:
    """Tests for remove_vote method."""

    @pytest.mark.asyncio
    async def test_remove_vote_deletes_and_decrements(self, unit_env):
        """Removing a vote should drop the record and the count."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        _, target = await _saved_stock(unit_env)
        identity = Identity.authenticated(UserId(uuid4()))
        await vote_service.apply_vote(target, identity, VoteDirection.DOWN)

        # Act
        result = await vote_service.remove_vote(target, identity)

        # Assert
        assert result.direction is None
        assert result.tally.down == 0
        assert await vote_repo.find(target, identity) is None

    @pytest.mark.asyncio
    async def test_remove_without_vote_raises(self, unit_env):
        """Removing a vote that was never cast should raise NoVoteFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, target = await _saved_stock(unit_env)

        # Act & Assert
        with pytest.raises(NoVoteFoundError):
            await vote_service.remove_vote(target, Identity.anonymous("session-1"))

    @pytest.mark.asyncio
    async def test_concurrent_removals_decrement_once(self, unit_env):
        """Withdrawing the same vote twice at once only takes one like away."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        stock_repo = await unit_env.get(StockRepository)
        stock, target = await _saved_stock(unit_env)
        identity = Identity.anonymous("session-a")
        await vote_service.apply_vote(target, Identity.anonymous("session-b"), VoteDirection.UP)
        await vote_service.apply_vote(target, identity, VoteDirection.UP)

        # Act
        results = await asyncio.gather(
            vote_service.remove_vote(target, identity),
            vote_service.remove_vote(target, identity),
            return_exceptions=True,
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], NoVoteFoundError)
        updated = await stock_repo.find_by_id(stock.id)
        assert updated.likes == 1


class TestViewerVotes:
    """Tests for viewer vote lookups and purging."""

    @pytest.mark.asyncio
    async def test_get_viewer_votes_maps_only_voted_targets(self, unit_env):
        """Only targets the viewer voted on should appear in the map."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        stock_repo = await unit_env.get(StockRepository)
        liked = await stock_repo.save(make_stock("AAA"))
        untouched = await stock_repo.save(make_stock("BBB"))
        viewer = Identity.anonymous("session-1")
        await vote_service.apply_vote(stock_ref(liked), viewer, VoteDirection.UP)

        # Act
        votes = await vote_service.get_viewer_votes(
            viewer, TargetType.STOCK, [liked.id, untouched.id]
        )

        # Assert
        assert votes == {liked.id: VoteDirection.UP}

    @pytest.mark.asyncio
    async def test_purge_target_removes_all_votes(self, unit_env):
        """Purging a target should drop every vote cast on it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        _, target = await _saved_stock(unit_env)
        for fingerprint in ("a", "b", "c"):
            await vote_service.apply_vote(
                target, Identity.anonymous(fingerprint), VoteDirection.UP
            )

        # Act
        removed = await vote_service.purge_target(target)

        # Assert
        assert removed == 3
        assert await vote_service.get_viewer_vote(target, Identity.anonymous("a")) is None
