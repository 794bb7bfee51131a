"""Create conversation use case."""

from pydantic import BaseModel

from forum.domain.service import ConversationService, UserService
from forum.domain.value import Identity

from .get_conversation import ConversationItem, conversation_item


class CreateConversationRequest(BaseModel):
    """Create conversation request."""

    title: str
    content: str
    identity: Identity


class CreateConversationUseCase:
    """Use case for starting a conversation, anonymously or not."""

    def __init__(
        self, conversation_service: ConversationService, user_service: UserService
    ) -> None:
        """Initialize create conversation use case.

        Args:
            conversation_service: Conversation domain service
            user_service: User service, for the author's display name
        """
        self.conversation_service = conversation_service
        self.user_service = user_service

    async def execute(self, request: CreateConversationRequest) -> ConversationItem:
        """Execute create conversation flow.

        Raises:
            ValidationError: If the title or content is empty
            NotFoundError: If an authenticated caller has no user record
        """
        author_name = None
        if not request.identity.is_anonymous:
            author = await self.user_service.require_user(request.identity.user_id)
            author_name = author.username.root

        conversation = await self.conversation_service.create_conversation(
            title=request.title,
            content=request.content,
            identity=request.identity,
            author_name=author_name,
        )
        return conversation_item(conversation)
