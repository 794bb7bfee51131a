"""Vote domain service.

The vote ledger: the only code path that writes vote records or the
up/down counters on targets.
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import DuplicateVoteError, NoVoteFoundError, NotFoundError
from forum.domain.model.vote import Vote
from forum.domain.repository import TargetRepository, VoteRepository
from forum.domain.value import (
    Identity,
    TargetRef,
    TargetType,
    VoteDirection,
    VoteId,
    VoteTally,
)
from forum.domain.value.common import ValueObject

from .base import Service


class VoteResult(ValueObject):
    """Outcome of a ledger operation."""

    target: TargetRef
    direction: Optional[VoteDirection]  # caller's vote after the operation
    tally: VoteTally


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        target_repository: TargetRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            target_repository: Target repository holding the counters
        """
        self.vote_repository = vote_repository
        self.target_repository = target_repository

    async def apply_vote(
        self, target: TargetRef, identity: Identity, direction: VoteDirection
    ) -> VoteResult:
        """Cast or switch a vote.

        - No prior vote: record it and increment the counter.
        - Opposite prior vote: decrement the old counter, switch the
          record, increment the new counter.
        - Same prior vote: rejected.

        Args:
            target: Target to vote on
            identity: Voting identity
            direction: Requested direction

        Returns:
            The caller's vote and the tally after the change

        Raises:
            NotFoundError: If the target does not exist
            DuplicateVoteError: If the identity already holds this vote
        """
        with logfire.span(
            "vote_service.apply_vote",
            target=str(target),
            voter=str(identity),
            direction=direction.value,
        ):
            await self._ensure_exists(target)

            async with self.target_repository.lock(target):
                existing = await self.vote_repository.find(target, identity)

                if existing and existing.direction == direction:
                    logfire.warn(
                        "Duplicate vote attempt",
                        target=str(target),
                        voter=str(identity),
                    )
                    raise DuplicateVoteError(str(target), direction.value)

                if existing:
                    await self.target_repository.adjust_tally(
                        target, existing.direction, -1
                    )
                    await self.vote_repository.change_direction(existing.id, direction)
                else:
                    vote = Vote(
                        id=VoteId(uuid4()),
                        target=target,
                        voter=identity,
                        direction=direction,
                        created_at=datetime.now(),
                    )
                    try:
                        await self.vote_repository.save(vote)
                    except IntegrityError:
                        logfire.warn(
                            "Concurrent duplicate vote",
                            target=str(target),
                            voter=str(identity),
                        )
                        raise DuplicateVoteError(str(target), direction.value)

                tally = await self.target_repository.adjust_tally(target, direction, 1)

            logfire.info(
                "Vote applied",
                target=str(target),
                direction=direction.value,
                switched=existing is not None,
                up=tally.up,
                down=tally.down,
            )
            return VoteResult(target=target, direction=direction, tally=tally)

    async def remove_vote(self, target: TargetRef, identity: Identity) -> VoteResult:
        """Withdraw the identity's vote on a target.

        Args:
            target: Voted target
            identity: Voting identity

        Returns:
            The tally after the change (direction is None)

        Raises:
            NotFoundError: If the target does not exist
            NoVoteFoundError: If the identity holds no vote on the target
        """
        with logfire.span(
            "vote_service.remove_vote", target=str(target), voter=str(identity)
        ):
            await self._ensure_exists(target)

            async with self.target_repository.lock(target):
                existing = await self.vote_repository.find(target, identity)
                if existing is None:
                    logfire.info(
                        "No vote to remove", target=str(target), voter=str(identity)
                    )
                    raise NoVoteFoundError(str(target))

                await self.vote_repository.delete(existing.id)
                tally = await self.target_repository.adjust_tally(
                    target, existing.direction, -1
                )

            logfire.info(
                "Vote removed",
                target=str(target),
                direction=existing.direction.value,
            )
            return VoteResult(target=target, direction=None, tally=tally)

    async def get_viewer_vote(
        self, target: TargetRef, identity: Identity
    ) -> Optional[VoteDirection]:
        """Get the identity's current vote on one target."""
        vote = await self.vote_repository.find(target, identity)
        return vote.direction if vote else None

    async def get_viewer_votes(
        self,
        identity: Identity,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, VoteDirection]:
        """Map each voted target id to the identity's vote direction.

        Args:
            identity: Viewing identity
            target_type: Type of the targets
            target_ids: Target IDs to check

        Returns:
            Directions keyed by target id (targets without a vote are absent)
        """
        if not target_ids:
            return {}

        votes = await self.vote_repository.find_by_voter_and_targets(
            voter=identity,
            target_type=target_type,
            target_ids=target_ids,
        )
        return {vote.target.target_id: vote.direction for vote in votes}

    async def purge_target(self, target: TargetRef) -> int:
        """Drop every vote record of a target that is being deleted.

        Returns:
            Number of votes removed
        """
        with logfire.span("vote_service.purge_target", target=str(target)):
            removed = await self.vote_repository.delete_by_target(target)
            logfire.info("Votes purged", target=str(target), count=removed)
            return removed

    async def purge_target_type(self, target_type: TargetType) -> int:
        """Drop every vote record on targets of one type.

        Returns:
            Number of votes removed
        """
        with logfire.span("vote_service.purge_target_type", target_type=target_type.value):
            removed = await self.vote_repository.delete_by_target_type(target_type)
            logfire.warn("Votes purged by type", target_type=target_type.value, count=removed)
            return removed

    async def _ensure_exists(self, target: TargetRef) -> None:
        if not await self.target_repository.exists(target):
            logfire.warn("Vote on non-existent target", target=str(target))
            raise NotFoundError(_label(target), str(target.target_id))


def _label(target: TargetRef) -> str:
    return target.target_type.value.capitalize()
