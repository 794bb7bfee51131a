"""Conversation domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.conversation import Conversation
from forum.domain.repository import ConversationRepository
from forum.domain.value import ANONYMOUS_LABEL, ConversationId, Identity

from .base import Service


class ConversationService(Service):
    """Domain service for conversations."""

    def __init__(self, conversation_repository: ConversationRepository) -> None:
        """Initialize conversation service.

        Args:
            conversation_repository: Conversation repository
        """
        self.conversation_repository = conversation_repository

    async def create_conversation(
        self,
        title: str,
        content: str,
        identity: Identity,
        author_name: str | None = None,
    ) -> Conversation:
        """Start a conversation, anonymously when the caller is anonymous.

        Raises:
            ValidationError: If title or content is empty
        """
        with logfire.span("conversation_service.create_conversation", author=str(identity)):
            title, content = title.strip(), content.strip()
            if not title or not content:
                raise ValidationError("Conversation title and content are required")

            anonymous = identity.is_anonymous
            conversation = Conversation(
                id=ConversationId(uuid4()),
                title=title,
                content=content,
                author_id=None if anonymous else identity.user_id,
                author_name=ANONYMOUS_LABEL if anonymous else (author_name or ANONYMOUS_LABEL),
                anonymous_author_id=identity.fingerprint if anonymous else None,
                is_anonymous=anonymous,
                created_at=datetime.now(),
            )
            saved = await self.conversation_repository.save(conversation)
            logfire.info("Conversation created", conversation_id=str(saved.id))
            return saved

    async def get_conversation(self, conversation_id: ConversationId) -> Conversation:
        """Get a conversation by ID.

        Raises:
            NotFoundError: If the conversation does not exist
        """
        conversation = await self.conversation_repository.find_by_id(conversation_id)
        if conversation is None:
            raise NotFoundError("Conversation", str(conversation_id))
        return conversation

    async def list_conversations(self, limit: int = 50, offset: int = 0) -> list[Conversation]:
        """List conversations, newest first."""
        with logfire.span("conversation_service.list_conversations", limit=limit, offset=offset):
            return await self.conversation_repository.find_recent(limit=limit, offset=offset)
