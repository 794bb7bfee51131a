"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from forum.domain.model.vote import Vote
from forum.domain.value import Identity, TargetRef, TargetType, VoteDirection, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(self, target: TargetRef, voter: Identity) -> Optional[Vote]:
        """Find an identity's vote on a target.

        Args:
            target: Voted target
            voter: Voting identity

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_targets(
        self,
        voter: Identity,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find an identity's votes on multiple targets (batch query).

        Args:
            voter: Voting identity
            target_type: Type of the targets
            target_ids: Target IDs to check

        Returns:
            Votes by the identity on the given targets
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the identity already voted on the target
        """
        pass

    @abstractmethod
    async def change_direction(self, vote_id: VoteId, direction: VoteDirection) -> None:
        """Switch an existing vote to the other direction.

        Args:
            vote_id: The vote to update
            direction: The new direction
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_target(self, target: TargetRef) -> int:
        """Delete every vote cast on a target.

        Args:
            target: The target being removed

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def delete_by_target_type(self, target_type: TargetType) -> int:
        """Delete every vote cast on targets of one type.

        Returns:
            Number of votes deleted
        """
        pass
