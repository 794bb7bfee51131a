"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from forum.application.usecase.vote import (
    ApplyVoteRequest,
    ApplyVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
    VoteResponse,
)
from forum.domain.service import IdentityService
from forum.domain.value import TargetRef, TargetType, VoteDirection
from forum.interface.api.identity import require_user_id, resolve_identity
from forum.interface.api.transaction import TransactionalRoute

router = APIRouter(
    prefix="/comments", tags=["comments"], route_class=TransactionalRoute
)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Exactly one of ``stock_id``, ``conversation_id`` or ``portfolio_id``
    names the content being discussed.
    """

    content: str = Field(max_length=5000)
    stock_id: UUID | None = None
    conversation_id: UUID | None = None
    portfolio_id: UUID | None = None
    parent_comment_id: UUID | None = None
    anonymous: bool = False


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(max_length=5000)


@router.get("/stock/{stock_id}", response_model=GetCommentsResponse)
async def get_stock_comments(
    stock_id: UUID,
    request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    identity_service: FromDishka[IdentityService],
) -> GetCommentsResponse:
    """Get the comment tree of a stock.

    Args:
        stock_id: Stock UUID
        request: Incoming request
        get_comments_use_case: Get comments use case from DI
        identity_service: Identity service from DI

    Returns:
        Top-level comments newest first, replies nested oldest first
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            parent_type=TargetType.STOCK,
            parent_id=stock_id,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CreateCommentResponse:
    """Create a comment or a reply.

    Anonymous callers may comment; their comments are keyed by session or IP.

    Args:
        body: Comment data naming exactly one parent
        request: Incoming request
        create_comment_use_case: Create comment use case from DI
        identity_service: Identity service from DI

    Returns:
        The created comment and the parent's new comment count

    Raises:
        ValidationError: If zero or several parents are named
    """
    parent = TargetRef.from_parent_ids(
        stock_id=body.stock_id,
        conversation_id=body.conversation_id,
        portfolio_id=body.portfolio_id,
    )

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            parent_type=parent.target_type,
            parent_id=parent.target_id,
            content=body.content,
            identity=resolve_identity(request, identity_service),
            parent_comment_id=body.parent_comment_id,
            anonymous=body.anonymous,
        )
    )


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    body: UpdateCommentAPIRequest,
    request: Request,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> UpdateCommentResponse:
    """Edit one's own comment. Requires authentication."""
    identity = resolve_identity(request, identity_service)
    require_user_id(identity, "edit comments")

    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, identity=identity, content=body.content
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> DeleteCommentResponse:
    """Delete one's own comment. Requires authentication.

    Replies to the deleted comment are kept but no longer shown.
    """
    identity = resolve_identity(request, identity_service)
    require_user_id(identity, "delete comments")

    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, identity=identity)
    )


@router.post("/{comment_id}/like", response_model=VoteResponse)
async def like_comment(
    comment_id: UUID,
    request: Request,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Like a comment."""
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            target_type=TargetType.COMMENT,
            target_id=comment_id,
            identity=resolve_identity(request, identity_service),
            direction=VoteDirection.UP,
        )
    )


@router.post("/{comment_id}/dislike", response_model=VoteResponse)
async def dislike_comment(
    comment_id: UUID,
    request: Request,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Dislike a comment."""
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            target_type=TargetType.COMMENT,
            target_id=comment_id,
            identity=resolve_identity(request, identity_service),
            direction=VoteDirection.DOWN,
        )
    )


@router.delete("/{comment_id}/vote", response_model=VoteResponse)
async def remove_comment_vote(
    comment_id: UUID,
    request: Request,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Withdraw the caller's vote on a comment."""
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            target_type=TargetType.COMMENT,
            target_id=comment_id,
            identity=resolve_identity(request, identity_service),
        )
    )
