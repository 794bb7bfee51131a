"""Portfolio routes."""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from forum.application.usecase.portfolio import (
    CreatePortfolioRequest,
    CreatePortfolioUseCase,
    DeletePortfolioRequest,
    DeletePortfolioResponse,
    DeletePortfolioUseCase,
    GetPortfolioRequest,
    GetPortfolioUseCase,
    ListPortfoliosRequest,
    ListPortfoliosResponse,
    ListPortfoliosUseCase,
    PortfolioItem,
)
from forum.application.usecase.vote import (
    ApplyVoteRequest,
    ApplyVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
    VoteResponse,
)
from forum.domain.error import ValidationError
from forum.domain.service import IdentityService
from forum.domain.value import PortfolioCategory, PortfolioSort, TargetType, VoteDirection
from forum.interface.api.identity import require_user_id, resolve_identity
from forum.interface.api.transaction import TransactionalRoute

router = APIRouter(
    prefix="/portfolios", tags=["portfolios"], route_class=TransactionalRoute
)


class CreatePortfolioAPIRequest(BaseModel):
    """API request for sharing a portfolio.

    Images are uploaded to object storage by the client; only URLs are sent.
    """

    title: str = Field(max_length=200)
    image_url: str
    thumbnail_url: str | None = None
    description: str | None = Field(default=None, max_length=1000)
    performance: str | None = None
    category: PortfolioCategory = PortfolioCategory.OTHER


class PortfolioVoteAPIRequest(BaseModel):
    """API request for voting on a portfolio post."""

    vote_type: Literal["upvote", "downvote"]


class PortfolioCommentAPIRequest(BaseModel):
    """API request for commenting on a portfolio post."""

    content: str = Field(max_length=5000)
    parent_comment_id: UUID | None = None
    anonymous: bool = False


def parse_category(category: str | None) -> PortfolioCategory | None:
    """Parse the category filter. Missing or "all" means no filter.

    Raises:
        ValidationError: If the category is unknown
    """
    if category is None or category.lower() == "all":
        return None
    try:
        return PortfolioCategory(category.upper())
    except ValueError as e:
        raise ValidationError(f"Unknown portfolio category: {category}") from e


def parse_sort(sort: str | None) -> PortfolioSort:
    """Parse the feed order. Unknown values fall back to newest first."""
    if sort is None:
        return PortfolioSort.HOT
    try:
        return PortfolioSort(sort.lower())
    except ValueError:
        return PortfolioSort.NEW


@router.get("", response_model=ListPortfoliosResponse)
async def list_portfolios(
    request: Request,
    list_portfolios_use_case: FromDishka[ListPortfoliosUseCase],
    identity_service: FromDishka[IdentityService],
    category: str | None = None,
    sort: str | None = None,
    page: int = 1,
    limit: int | None = None,
) -> ListPortfoliosResponse:
    """List approved portfolio posts.

    Args:
        request: Incoming request
        list_portfolios_use_case: List portfolios use case from DI
        identity_service: Identity service from DI
        category: Category filter, or "all"
        sort: hot, new, top or controversial
        page: 1-based page number
        limit: Page size, capped at the configured maximum

    Returns:
        One page of the feed with pagination metadata

    Raises:
        ValidationError: If the category is unknown or page/limit are not positive
    """
    return await list_portfolios_use_case.execute(
        ListPortfoliosRequest(
            category=parse_category(category),
            sort=parse_sort(sort),
            page=page,
            limit=limit,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.get("/{portfolio_id}", response_model=PortfolioItem)
async def get_portfolio(
    portfolio_id: UUID,
    request: Request,
    get_portfolio_use_case: FromDishka[GetPortfolioUseCase],
    identity_service: FromDishka[IdentityService],
) -> PortfolioItem:
    """Get a portfolio post by ID."""
    return await get_portfolio_use_case.execute(
        GetPortfolioRequest(
            portfolio_id=portfolio_id,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.post("", response_model=PortfolioItem, status_code=status.HTTP_201_CREATED)
async def create_portfolio(
    body: CreatePortfolioAPIRequest,
    request: Request,
    create_portfolio_use_case: FromDishka[CreatePortfolioUseCase],
    identity_service: FromDishka[IdentityService],
) -> PortfolioItem:
    """Share a portfolio. Requires authentication."""
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "share portfolios")

    return await create_portfolio_use_case.execute(
        CreatePortfolioRequest(**body.model_dump(), user_id=user_id)
    )


@router.delete("/{portfolio_id}", response_model=DeletePortfolioResponse)
async def delete_portfolio(
    portfolio_id: UUID,
    request: Request,
    delete_portfolio_use_case: FromDishka[DeletePortfolioUseCase],
    identity_service: FromDishka[IdentityService],
) -> DeletePortfolioResponse:
    """Delete one's own portfolio post with its comments and votes."""
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "delete portfolios")

    return await delete_portfolio_use_case.execute(
        DeletePortfolioRequest(portfolio_id=portfolio_id, user_id=user_id)
    )


@router.post("/{portfolio_id}/vote", response_model=VoteResponse)
async def vote_portfolio(
    portfolio_id: UUID,
    body: PortfolioVoteAPIRequest,
    request: Request,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Upvote or downvote a portfolio post."""
    direction = VoteDirection.UP if body.vote_type == "upvote" else VoteDirection.DOWN

    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            target_type=TargetType.PORTFOLIO,
            target_id=portfolio_id,
            identity=resolve_identity(request, identity_service),
            direction=direction,
        )
    )


@router.delete("/{portfolio_id}/vote", response_model=VoteResponse)
async def remove_portfolio_vote(
    portfolio_id: UUID,
    request: Request,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Withdraw the caller's vote on a portfolio post."""
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            target_type=TargetType.PORTFOLIO,
            target_id=portfolio_id,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.get("/{portfolio_id}/comments", response_model=GetCommentsResponse)
async def get_portfolio_comments(
    portfolio_id: UUID,
    request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    identity_service: FromDishka[IdentityService],
) -> GetCommentsResponse:
    """Get the comment tree of a portfolio post."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            parent_type=TargetType.PORTFOLIO,
            parent_id=portfolio_id,
            identity=resolve_identity(request, identity_service),
        )
    )


@router.post(
    "/{portfolio_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_portfolio_comment(
    portfolio_id: UUID,
    body: PortfolioCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    identity_service: FromDishka[IdentityService],
) -> CreateCommentResponse:
    """Comment on a portfolio post, or reply to one of its comments."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            parent_type=TargetType.PORTFOLIO,
            parent_id=portfolio_id,
            content=body.content,
            identity=resolve_identity(request, identity_service),
            parent_comment_id=body.parent_comment_id,
            anonymous=body.anonymous,
        )
    )
