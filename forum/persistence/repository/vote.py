"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import Identity, TargetRef, TargetType, VoteDirection, VoteId
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import votes_table


def _voter_clause(voter: Identity):
    if voter.user_id is not None:
        return votes_table.c.user_id == voter.user_id
    return votes_table.c.fingerprint == voter.fingerprint


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, target: TargetRef, voter: Identity) -> Optional[Vote]:
        """Find an identity's vote on a target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.target_type == target.target_type.value,
                votes_table.c.target_id == target.target_id,
                _voter_clause(voter),
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_targets(
        self,
        voter: Identity,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find an identity's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
                _voter_clause(voter),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote. Duplicates are rejected by the unique indexes.

        The insert runs in a savepoint so a rejected duplicate leaves the
        request transaction usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def change_direction(self, vote_id: VoteId, direction: VoteDirection) -> None:
        """Flip the direction of an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(direction=direction.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_target(self, target: TargetRef) -> int:
        """Delete every vote on a target."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.target_type == target.target_type.value,
                votes_table.c.target_id == target.target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_target_type(self, target_type: TargetType) -> int:
        """Delete every vote on targets of one type."""
        stmt = delete(votes_table).where(votes_table.c.target_type == target_type.value)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
