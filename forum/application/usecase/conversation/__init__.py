"""Conversation use cases."""

from .create_conversation import CreateConversationRequest, CreateConversationUseCase
from .get_conversation import (
    ConversationItem,
    GetConversationRequest,
    GetConversationUseCase,
)
from .list_conversations import (
    ListConversationsRequest,
    ListConversationsResponse,
    ListConversationsUseCase,
)

__all__ = [
    "ConversationItem",
    "CreateConversationRequest",
    "CreateConversationUseCase",
    "GetConversationRequest",
    "GetConversationUseCase",
    "ListConversationsRequest",
    "ListConversationsResponse",
    "ListConversationsUseCase",
]
