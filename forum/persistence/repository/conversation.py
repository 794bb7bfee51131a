"""PostgreSQL implementation of Conversation repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Conversation
from forum.domain.repository import ConversationRepository
from forum.domain.value import ConversationId
from forum.persistence.mappers import conversation_to_dict, row_to_conversation
from forum.persistence.tables import conversations_table


class PostgresConversationRepository(ConversationRepository):
    """PostgreSQL implementation of ConversationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, conversation_id: ConversationId) -> Optional[Conversation]:
        """Find a conversation by ID."""
        stmt = select(conversations_table).where(
            conversations_table.c.id == conversation_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_conversation(row._asdict()) if row else None

    async def find_recent(self, limit: int = 50, offset: int = 0) -> List[Conversation]:
        """List conversations, newest first."""
        stmt = (
            select(conversations_table)
            .order_by(desc(conversations_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_conversation(row._asdict()) for row in result.fetchall()]

    async def save(self, conversation: Conversation) -> Conversation:
        """Insert a new conversation."""
        stmt = insert(conversations_table).values(**conversation_to_dict(conversation))
        await self.session.execute(stmt)
        await self.session.flush()
        return conversation
