"""Get conversation use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Conversation
from forum.domain.service import ConversationService, VoteService
from forum.domain.value import (
    ConversationId,
    Identity,
    LastComment,
    TargetRef,
    TargetType,
    VoteDirection,
)


class ConversationItem(BaseModel):
    """Conversation in response."""

    conversation_id: str
    title: str
    content: str
    author_id: str | None
    author_name: str
    is_anonymous: bool
    likes: int
    dislikes: int
    comment_count: int
    last_comment: LastComment | None
    created_at: datetime
    is_liked: bool  # Viewer has liked it
    user_vote: VoteDirection | None = None


def conversation_item(
    conversation: Conversation, user_vote: VoteDirection | None = None
) -> ConversationItem:
    """Build the response item for a conversation."""
    return ConversationItem(
        conversation_id=str(conversation.id),
        title=conversation.title,
        content=conversation.content,
        author_id=str(conversation.author_id) if conversation.author_id else None,
        author_name=conversation.author_name,
        is_anonymous=conversation.is_anonymous,
        likes=conversation.likes,
        dislikes=conversation.dislikes,
        comment_count=conversation.comment_count,
        last_comment=conversation.last_comment,
        created_at=conversation.created_at,
        is_liked=user_vote == VoteDirection.UP,
        user_vote=user_vote,
    )


class GetConversationRequest(BaseModel):
    """Get conversation request."""

    conversation_id: UUID
    identity: Identity


class GetConversationUseCase:
    """Use case for getting a conversation with the viewer's vote."""

    def __init__(
        self, conversation_service: ConversationService, vote_service: VoteService
    ) -> None:
        """Initialize get conversation use case.

        Args:
            conversation_service: Conversation domain service
            vote_service: Vote service for the viewer's vote
        """
        self.conversation_service = conversation_service
        self.vote_service = vote_service

    async def execute(self, request: GetConversationRequest) -> ConversationItem:
        """Execute get conversation flow.

        Raises:
            NotFoundError: If the conversation does not exist
        """
        conversation = await self.conversation_service.get_conversation(
            ConversationId(request.conversation_id)
        )
        user_vote = await self.vote_service.get_viewer_vote(
            TargetRef(target_type=TargetType.CONVERSATION, target_id=conversation.id),
            request.identity,
        )
        return conversation_item(conversation, user_vote)
