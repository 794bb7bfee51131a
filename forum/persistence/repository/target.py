"""PostgreSQL implementation of Target repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional, Tuple

from sqlalchemy import Table, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.repository import TargetRepository
from forum.domain.value import (
    LastComment,
    TargetRef,
    TargetType,
    VoteDirection,
    VoteTally,
)
from forum.persistence.mappers import last_comment_to_json, row_to_last_comment
from forum.persistence.tables import (
    comments_table,
    conversations_table,
    portfolio_posts_table,
    stocks_table,
)

# Table, up-counter column, down-counter column
COUNTERS: Dict[TargetType, Tuple[Table, str, str]] = {
    TargetType.STOCK: (stocks_table, "likes", "dislikes"),
    TargetType.CONVERSATION: (conversations_table, "likes", "dislikes"),
    TargetType.PORTFOLIO: (portfolio_posts_table, "upvotes", "downvotes"),
    TargetType.COMMENT: (comments_table, "likes", "dislikes"),
}

CONTENT_TABLES = (stocks_table, conversations_table, portfolio_posts_table)


class PostgresTargetRepository(TargetRepository):
    """PostgreSQL implementation of TargetRepository.

    Locks are row locks (``SELECT ... FOR UPDATE``) held until the request
    transaction ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, ref: TargetRef) -> bool:
        """Check whether a target exists."""
        table, _, _ = COUNTERS[ref.target_type]
        stmt = select(table.c.id).where(table.c.id == ref.target_id)
        result = await self.session.execute(stmt)
        return result.scalar() is not None

    @asynccontextmanager
    async def lock(self, ref: TargetRef) -> AsyncIterator[None]:
        """Take a row lock on the target for the rest of the transaction."""
        table, _, _ = COUNTERS[ref.target_type]
        stmt = select(table.c.id).where(table.c.id == ref.target_id).with_for_update()
        await self.session.execute(stmt)
        yield

    async def adjust_tally(
        self, ref: TargetRef, direction: VoteDirection, delta: int
    ) -> VoteTally:
        """Atomically add ``delta`` to one counter, flooring at zero."""
        table, up, down = COUNTERS[ref.target_type]
        column = up if direction == VoteDirection.UP else down
        stmt = (
            update(table)
            .where(table.c.id == ref.target_id)
            .values({column: func.greatest(table.c[column] + delta, 0)})
            .returning(table.c[up], table.c[down])
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError(ref.target_type.value.capitalize(), str(ref.target_id))

        await self.session.flush()
        return VoteTally(up=row[0], down=row[1])

    async def adjust_comment_count(self, ref: TargetRef, delta: int) -> int:
        """Atomically add ``delta`` to a content target's comment count."""
        table = self._content_table(ref)
        stmt = (
            update(table)
            .where(table.c.id == ref.target_id)
            .values(comment_count=func.greatest(table.c.comment_count + delta, 0))
            .returning(table.c.comment_count)
        )
        result = await self.session.execute(stmt)
        count = result.scalar()
        if count is None:
            raise NotFoundError(ref.target_type.value.capitalize(), str(ref.target_id))

        await self.session.flush()
        return count

    async def get_last_comment(self, ref: TargetRef) -> Optional[LastComment]:
        """Get the last-comment snapshot of a content target."""
        table = self._content_table(ref)
        stmt = select(table.c.last_comment).where(table.c.id == ref.target_id)
        result = await self.session.execute(stmt)
        return row_to_last_comment(result.scalar())

    async def set_last_comment(
        self, ref: TargetRef, last_comment: Optional[LastComment]
    ) -> None:
        """Replace (or clear) the last-comment snapshot of a content target."""
        table = self._content_table(ref)
        stmt = (
            update(table)
            .where(table.c.id == ref.target_id)
            .values(last_comment=last_comment_to_json(last_comment))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def reset_aggregates(self) -> int:
        """Zero comment counts and clear snapshots on every content target."""
        touched = 0
        for table in CONTENT_TABLES:
            stmt = update(table).values(comment_count=0, last_comment=None)
            result = await self.session.execute(stmt)
            touched += result.rowcount  # type: ignore[attr-defined]

        await self.session.flush()
        return touched

    def _content_table(self, ref: TargetRef) -> Table:
        if not ref.target_type.is_content:
            raise ValueError(f"{ref.target_type.value} has no comment aggregates")
        return COUNTERS[ref.target_type][0]
