"""SQLAlchemy unit of work."""

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import StorageFailureError
from forum.domain.repository import UnitOfWork


class SqlUnitOfWork(UnitOfWork):
    """Commits or rolls back the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the session the request's repositories share.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the session, mapping driver failures to StorageFailureError."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logfire.error("Session commit failed", error=str(e))
            await self.session.rollback()
            raise StorageFailureError("Failed to save changes") from e
        logfire.debug("Session committed")

    async def rollback(self) -> None:
        """Roll back the session."""
        await self.session.rollback()
        logfire.debug("Session rolled back")
