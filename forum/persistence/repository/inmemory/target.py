"""In-memory target repository for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from forum.domain.error import NotFoundError
from forum.domain.repository.target import TargetRepository
from forum.domain.value import LastComment, TargetRef, TargetType, VoteDirection, VoteTally

from .store import InMemoryStore, round_trip

# Up-counter and down-counter field names per target type
COUNTER_FIELDS = {
    TargetType.STOCK: ("likes", "dislikes"),
    TargetType.CONVERSATION: ("likes", "dislikes"),
    TargetType.PORTFOLIO: ("upvotes", "downvotes"),
    TargetType.COMMENT: ("likes", "dislikes"),
}


class InMemoryTargetRepository(TargetRepository):
    """In-memory implementation of TargetRepository for testing.

    Locks are one ``asyncio.Lock`` per target, shared through the store.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def exists(self, ref: TargetRef) -> bool:
        """Check whether a target exists."""
        return ref.target_id in self._store.table_for(ref.target_type)

    @asynccontextmanager
    async def lock(self, ref: TargetRef) -> AsyncIterator[None]:
        """Hold the target's lock for the duration of the block."""
        async with self._store.locks[ref]:
            yield

    async def adjust_tally(
        self, ref: TargetRef, direction: VoteDirection, delta: int
    ) -> VoteTally:
        """Add ``delta`` to one counter, flooring at zero."""
        await round_trip()
        table = self._store.table_for(ref.target_type)
        row = table.get(ref.target_id)
        if row is None:
            raise NotFoundError(ref.target_type.value.capitalize(), str(ref.target_id))

        up, down = COUNTER_FIELDS[ref.target_type]
        field_name = up if direction == VoteDirection.UP else down
        row = row.model_copy(
            update={field_name: max(getattr(row, field_name) + delta, 0)}
        )
        table[ref.target_id] = row
        return VoteTally(up=getattr(row, up), down=getattr(row, down))

    async def adjust_comment_count(self, ref: TargetRef, delta: int) -> int:
        """Add ``delta`` to a content target's comment count."""
        await round_trip()
        table = self._content_table(ref)
        row = table.get(ref.target_id)
        if row is None:
            raise NotFoundError(ref.target_type.value.capitalize(), str(ref.target_id))

        row = row.model_copy(update={"comment_count": max(row.comment_count + delta, 0)})
        table[ref.target_id] = row
        return row.comment_count

    async def get_last_comment(self, ref: TargetRef) -> Optional[LastComment]:
        """Get the last-comment snapshot of a content target."""
        row = self._content_table(ref).get(ref.target_id)
        return row.last_comment if row else None

    async def set_last_comment(
        self, ref: TargetRef, last_comment: Optional[LastComment]
    ) -> None:
        """Replace (or clear) the last-comment snapshot of a content target."""
        table = self._content_table(ref)
        row = table.get(ref.target_id)
        if row is not None:
            table[ref.target_id] = row.model_copy(update={"last_comment": last_comment})

    async def reset_aggregates(self) -> int:
        """Zero comment counts and clear snapshots on every content target."""
        touched = 0
        for target_type in TargetType:
            if not target_type.is_content:
                continue
            table = self._store.table_for(target_type)
            for key, row in table.items():
                table[key] = row.model_copy(
                    update={"comment_count": 0, "last_comment": None}
                )
                touched += 1
        return touched

    def _content_table(self, ref: TargetRef) -> dict:
        if not ref.target_type.is_content:
            raise ValueError(f"{ref.target_type.value} has no comment aggregates")
        return self._store.table_for(ref.target_type)
