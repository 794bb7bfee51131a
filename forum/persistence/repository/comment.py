"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, TargetRef
from forum.persistence.mappers import PARENT_COLUMNS, comment_to_dict, row_to_comment
from forum.persistence.tables import comments_table


def _parent_clause(parent: TargetRef):
    return comments_table.c[PARENT_COLUMNS[parent.target_type]] == parent.target_id


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_parent(self, parent: TargetRef) -> List[Comment]:
        """Find all comments on a piece of content, newest first."""
        stmt = (
            select(comments_table)
            .where(_parent_clause(parent))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_latest_by_parent(self, parent: TargetRef) -> Optional[Comment]:
        """Find the most recent comment on a piece of content."""
        stmt = (
            select(comments_table)
            .where(_parent_clause(parent))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the text of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a single comment."""
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id == comment_id)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.scalar_one_or_none() is not None
        await self.session.flush()
        return deleted

    async def delete_by_parent(self, parent: TargetRef) -> List[CommentId]:
        """Delete every comment on a piece of content."""
        stmt = (
            delete(comments_table)
            .where(_parent_clause(parent))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = [CommentId(comment_id) for comment_id in result.scalars().all()]
        await self.session.flush()
        return deleted

    async def delete_all(self) -> int:
        """Delete every comment."""
        result = await self.session.execute(delete(comments_table))
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
