"""Conversation routes."""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, Field

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from forum.application.usecase.conversation import (
    ConversationItem,
    CreateConversationRequest,
    CreateConversationUseCase,
    GetConversationRequest,
    GetConversationUseCase,
    ListConversationsRequest,
    ListConversationsResponse,
    ListConversationsUseCase,
)
from forum.application.usecase.vote import (
    ApplyVoteRequest,
    ApplyVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
    VoteResponse,
)
from forum.domain.service import IdentityService
from forum.domain.value import Identity, TargetType, VoteDirection
from forum.interface.api.identity import resolve_identity
from forum.interface.api.transaction import TransactionalRoute

router = APIRouter(
    prefix="/conversations", tags=["conversations"], route_class=TransactionalRoute
)


class CreateConversationAPIRequest(BaseModel):
    """API request for starting a conversation."""

    title: str = Field(max_length=200)
    content: str = Field(max_length=10000)


class ContentCommentAPIRequest(BaseModel):
    """API request for commenting on content addressed by the URL."""

    content: str = Field(max_length=5000)
    parent_comment_id: UUID | None = None
    anonymous: bool = False


@router.get("", response_model=ListConversationsResponse)
async def list_conversations(
    request: Request,
    list_conversations_use_case: FromDishka[ListConversationsUseCase],
    identity_service: FromDishka[IdentityService],
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListConversationsResponse:
    """List conversations, newest first.

    Args:
        request: Incoming request
        list_conversations_use_case: List conversations use case from DI
        identity_service: Identity service from DI
        limit: Page size
        offset: Number of conversations to skip

    Returns:
        Conversations with the caller's vote on each
    """
    return await list_conversations_use_case.execute(
        ListConversationsRequest(
            limit=limit,
            offset=offset,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.get("/{conversation_id}", response_model=ConversationItem)
async def get_conversation(
    conversation_id: UUID,
    request: Request,
    get_conversation_use_case: FromDishka[GetConversationUseCase],
    identity_service: FromDishka[IdentityService],
) -> ConversationItem:
    """Get a conversation by ID."""
    return await get_conversation_use_case.execute(
        GetConversationRequest(
            conversation_id=conversation_id,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.post(
    "", response_model=ConversationItem, status_code=status.HTTP_201_CREATED
)
async def create_conversation(
    body: CreateConversationAPIRequest,
    request: Request,
    create_conversation_use_case: FromDishka[CreateConversationUseCase],
    identity_service: FromDishka[IdentityService],
) -> ConversationItem:
    """Start a conversation. Anonymous callers are allowed."""
    return await create_conversation_use_case.execute(
        CreateConversationRequest(
            title=body.title,
            content=body.content,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.get("/{conversation_id}/comments", response_model=GetCommentsResponse)
async def get_conversation_comments(
    conversation_id: UUID,
    request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    identity_service: FromDishka[IdentityService],
) -> GetCommentsResponse:
    """Get the comment tree of a conversation."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            parent_type=TargetType.CONVERSATION,
            parent_id=conversation_id,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.post(
    "/{conversation_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_conversation_comment(
    conversation_id: UUID,
    body: ContentCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CreateCommentResponse:
    """Comment on a conversation, or reply to one of its comments."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            parent_type=TargetType.CONVERSATION,
            parent_id=conversation_id,
            content=body.content,
            identity=resolve_identity(request, identity_service),
            parent_comment_id=body.parent_comment_id,
            anonymous=body.anonymous,
        )
    )


async def _vote(
    use_case: ApplyVoteUseCase,
    conversation_id: UUID,
    identity: Identity,
    direction: VoteDirection,
) -> VoteResponse:
    return await use_case.execute(
        ApplyVoteRequest(
            target_type=TargetType.CONVERSATION,
            target_id=conversation_id,
            identity=identity,
            direction=direction,
        )
    )


@router.post("/{conversation_id}/like", response_model=VoteResponse)
async def like_conversation(
    conversation_id: UUID,
    request: Request,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Like a conversation."""
    return await _vote(
        apply_vote_use_case,
        conversation_id,
        resolve_identity(request, identity_service),
        VoteDirection.UP,
    )


@router.post("/{conversation_id}/dislike", response_model=VoteResponse)
async def dislike_conversation(
    conversation_id: UUID,
    request: Request,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Dislike a conversation."""
    return await _vote(
        apply_vote_use_case,
        conversation_id,
        resolve_identity(request, identity_service),
        VoteDirection.DOWN,
    )


@router.post("/{conversation_id}/unlike", response_model=VoteResponse)
async def unlike_conversation(
    conversation_id: UUID,
    request: Request,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Withdraw the caller's vote on a conversation."""
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            target_type=TargetType.CONVERSATION,
            target_id=conversation_id,
            identity=resolve_identity(request, identity_service),
        )
    )
