"""Target repository interface.

Counters and comment aggregates live on the target rows themselves
(stocks, conversations, portfolio posts and comments), so they are
accessed through one interface keyed by ``TargetRef``.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Optional

from forum.domain.value import LastComment, TargetRef, VoteDirection, VoteTally


class TargetRepository(ABC):
    """Repository for the mutable summary fields of votable targets."""

    @abstractmethod
    async def exists(self, ref: TargetRef) -> bool:
        """Check whether a target exists.

        Args:
            ref: Target reference

        Returns:
            True if the target exists
        """
        pass

    @abstractmethod
    def lock(self, ref: TargetRef) -> AsyncContextManager[None]:
        """Serialize read-check-write sequences on one target.

        Concurrent holders for the same target wait for each other; other
        targets are not affected.

        Args:
            ref: Target reference
        """
        pass

    @abstractmethod
    async def adjust_tally(
        self, ref: TargetRef, direction: VoteDirection, delta: int
    ) -> VoteTally:
        """Atomically add ``delta`` to one counter, flooring at zero.

        Args:
            ref: Target reference
            direction: Which counter to change
            delta: Amount to add (negative to decrement)

        Returns:
            The tally after the change

        Raises:
            NotFoundError: If the target does not exist
        """
        pass

    @abstractmethod
    async def adjust_comment_count(self, ref: TargetRef, delta: int) -> int:
        """Atomically add ``delta`` to a content target's comment count.

        The count never drops below zero.

        Args:
            ref: Content target reference
            delta: Amount to add (negative to decrement)

        Returns:
            The new comment count
        """
        pass

    @abstractmethod
    async def get_last_comment(self, ref: TargetRef) -> Optional[LastComment]:
        """Get the last-comment snapshot of a content target.

        Args:
            ref: Content target reference

        Returns:
            The snapshot, or None if the slot is empty
        """
        pass

    @abstractmethod
    async def set_last_comment(
        self, ref: TargetRef, last_comment: Optional[LastComment]
    ) -> None:
        """Replace (or clear) the last-comment snapshot of a content target.

        Args:
            ref: Content target reference
            last_comment: New snapshot, None to clear
        """
        pass

    @abstractmethod
    async def reset_aggregates(self) -> int:
        """Zero comment counts and clear snapshots on every content target.

        Returns:
            Number of targets touched
        """
        pass
