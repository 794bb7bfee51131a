"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import Identity, TargetRef, TargetType, VoteDirection, VoteId

from .store import InMemoryStore, round_trip


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find(self, target: TargetRef, voter: Identity) -> Optional[Vote]:
        """Find an identity's vote on a target."""
        await round_trip()
        for vote in self._store.votes.values():
            if vote.target == target and vote.voter == voter:
                return vote
        return None

    async def find_by_voter_and_targets(
        self,
        voter: Identity,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find an identity's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for v in self._store.votes.values()
            if v.voter == voter
            and v.target.target_type == target_type
            and v.target.target_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the identity already voted on the target
        """
        await round_trip()
        if any(
            v.target == vote.target and v.voter == vote.voter
            for v in self._store.votes.values()
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._store.votes[vote.id] = vote
        return vote

    async def change_direction(self, vote_id: VoteId, direction: VoteDirection) -> None:
        """Flip the direction of an existing vote."""
        await round_trip()
        vote = self._store.votes.get(vote_id)
        if vote:
            self._store.votes[vote_id] = vote.model_copy(update={"direction": direction})

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        await round_trip()
        self._store.votes.pop(vote_id, None)

    async def delete_by_target(self, target: TargetRef) -> int:
        """Delete every vote on a target."""
        doomed = [v.id for v in self._store.votes.values() if v.target == target]
        for vote_id in doomed:
            del self._store.votes[vote_id]
        return len(doomed)

    async def delete_by_target_type(self, target_type: TargetType) -> int:
        """Delete every vote on targets of one type."""
        doomed = [
            v.id for v in self._store.votes.values() if v.target.target_type == target_type
        ]
        for vote_id in doomed:
            del self._store.votes[vote_id]
        return len(doomed)
