"""In-memory conversation repository for testing."""

from typing import Optional

from forum.domain.model.conversation import Conversation
from forum.domain.repository.conversation import ConversationRepository
from forum.domain.value import ConversationId

from .store import InMemoryStore


class InMemoryConversationRepository(ConversationRepository):
    """In-memory implementation of ConversationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, conversation_id: ConversationId) -> Optional[Conversation]:
        """Find a conversation by ID."""
        return self._store.conversations.get(conversation_id)

    async def find_recent(self, limit: int = 50, offset: int = 0) -> list[Conversation]:
        """List conversations, newest first."""
        conversations = sorted(
            self._store.conversations.values(),
            key=lambda c: c.created_at,
            reverse=True,
        )
        return conversations[offset : offset + limit]

    async def save(self, conversation: Conversation) -> Conversation:
        """Save a conversation."""
        self._store.conversations[conversation.id] = conversation
        return conversation
