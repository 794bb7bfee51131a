"""Conversation repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.conversation import Conversation
from forum.domain.value import ConversationId


class ConversationRepository(ABC):
    """Repository for Conversation entity."""

    @abstractmethod
    async def find_by_id(self, conversation_id: ConversationId) -> Optional[Conversation]:
        """Find a conversation by ID."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 50, offset: int = 0) -> List[Conversation]:
        """List conversations, newest first."""
        pass

    @abstractmethod
    async def save(self, conversation: Conversation) -> Conversation:
        """Insert a new conversation."""
        pass
