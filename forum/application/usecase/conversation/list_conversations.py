"""List conversations use case."""

from pydantic import BaseModel, Field

from forum.domain.service import ConversationService, VoteService
from forum.domain.value import Identity, TargetType

from .get_conversation import ConversationItem, conversation_item


class ListConversationsRequest(BaseModel):
    """List conversations request."""

    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    identity: Identity


class ListConversationsResponse(BaseModel):
    """List conversations response."""

    conversations: list[ConversationItem]
    limit: int
    offset: int


class ListConversationsUseCase:
    """Use case for listing conversations, newest first."""

    def __init__(
        self, conversation_service: ConversationService, vote_service: VoteService
    ) -> None:
        """Initialize list conversations use case.

        Args:
            conversation_service: Conversation domain service
            vote_service: Vote service for the viewer's votes
        """
        self.conversation_service = conversation_service
        self.vote_service = vote_service

    async def execute(self, request: ListConversationsRequest) -> ListConversationsResponse:
        """Execute list conversations flow."""
        conversations = await self.conversation_service.list_conversations(
            limit=request.limit, offset=request.offset
        )

        votes = await self.vote_service.get_viewer_votes(
            identity=request.identity,
            target_type=TargetType.CONVERSATION,
            target_ids=[c.id for c in conversations],
        )

        return ListConversationsResponse(
            conversations=[conversation_item(c, votes.get(c.id)) for c in conversations],
            limit=request.limit,
            offset=request.offset,
        )
