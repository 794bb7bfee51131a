"""Stock routes."""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from forum.application.usecase.stock import (
    CreateStockRequest,
    CreateStockUseCase,
    DeleteStockRequest,
    DeleteStockResponse,
    DeleteStockUseCase,
    GetStockRequest,
    GetStockUseCase,
    ListStocksRequest,
    ListStocksResponse,
    ListStocksUseCase,
    StockItem,
    UpdateStockRequest,
    UpdateStockUseCase,
)
from forum.application.usecase.vote import (
    ApplyVoteRequest,
    ApplyVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
    VoteResponse,
)
from forum.domain.service import IdentityService
from forum.domain.value import TargetType, VoteDirection
from forum.interface.api.identity import require_user_id, resolve_identity
from forum.interface.api.transaction import TransactionalRoute

router = APIRouter(
    prefix="/stocks", tags=["stocks"], route_class=TransactionalRoute
)


class CreateStockAPIRequest(BaseModel):
    """API request for listing a stock."""

    symbol: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=200)
    current_price: float
    percent_change: float = 0.0
    description: str | None = None
    exchange: str | None = None
    currency: str | None = None
    previous_close: float | None = None


class UpdateStockAPIRequest(BaseModel):
    """API request for a merge-patch update. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    exchange: str | None = None
    currency: str | None = None
    current_price: float | None = None
    previous_close: float | None = None
    percent_change: float | None = None


@router.get("", response_model=ListStocksResponse)
async def list_stocks(
    request: Request,
    list_stocks_use_case: FromDishka[ListStocksUseCase],
    identity_service: FromDishka[IdentityService],
    search: str | None = None,
) -> ListStocksResponse:
    """List stocks, most discussed first.

    Args:
        request: Incoming request
        list_stocks_use_case: List stocks use case from DI
        identity_service: Identity service from DI
        search: Optional symbol or name fragment

    Returns:
        Matching stocks with the caller's vote on each
    """
    return await list_stocks_use_case.execute(
        ListStocksRequest(
            search=search, identity=resolve_identity(request, identity_service)
        )
    )


@router.get("/symbol/{symbol}", response_model=StockItem)
async def get_stock_by_symbol(
    symbol: str,
    request: Request,
    get_stock_use_case: FromDishka[GetStockUseCase],
    identity_service: FromDishka[IdentityService],
) -> StockItem:
    """Get a stock by ticker symbol (case-insensitive)."""
    return await get_stock_use_case.execute(
        GetStockRequest(
            symbol=symbol, identity=resolve_identity(request, identity_service)
        )
    )


@router.get("/{stock_id}", response_model=StockItem)
async def get_stock(
    stock_id: UUID,
    request: Request,
    get_stock_use_case: FromDishka[GetStockUseCase],
    identity_service: FromDishka[IdentityService],
) -> StockItem:
    """Get a stock by ID."""
    return await get_stock_use_case.execute(
        GetStockRequest(
            stock_id=stock_id, identity=resolve_identity(request, identity_service)
        )
    )


@router.post("", response_model=StockItem, status_code=status.HTTP_201_CREATED)
async def create_stock(
    body: CreateStockAPIRequest,
    request: Request,
    create_stock_use_case: FromDishka[CreateStockUseCase],
    identity_service: FromDishka[IdentityService],
) -> StockItem:
    """List a new stock.

    Requires authentication. Symbols are unique (case-insensitive).

    Args:
        body: Stock data
        request: Incoming request
        create_stock_use_case: Create stock use case from DI
        identity_service: Identity service from DI

    Returns:
        The created stock
    """
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "create stocks")

    return await create_stock_use_case.execute(
        CreateStockRequest(**body.model_dump(), user_id=user_id)
    )


@router.put("/{stock_id}", response_model=StockItem)
async def update_stock(
    stock_id: UUID,
    body: UpdateStockAPIRequest,
    request: Request,
    update_stock_use_case: FromDishka[UpdateStockUseCase],
    identity_service: FromDishka[IdentityService],
) -> StockItem:
    """Update a stock's descriptive and market fields.

    Requires authentication. Only the fields present in the body change.
    """
    identity = resolve_identity(request, identity_service)
    require_user_id(identity, "update stocks")

    return await update_stock_use_case.execute(
        UpdateStockRequest(stock_id=stock_id, changes=body.model_dump(exclude_unset=True))
    )


@router.delete("/{stock_id}", response_model=DeleteStockResponse)
async def delete_stock(
    stock_id: UUID,
    request: Request,
    delete_stock_use_case: FromDishka[DeleteStockUseCase],
    identity_service: FromDishka[IdentityService],
) -> DeleteStockResponse:
    """Delete a stock with its comments and votes.

    Only the user who listed the stock can delete it.
    """
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "delete stocks")

    return await delete_stock_use_case.execute(
        DeleteStockRequest(stock_id=stock_id, user_id=user_id)
    )


@router.post("/{stock_id}/like", response_model=VoteResponse)
async def like_stock(
    stock_id: UUID,
    request: Request,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Like a stock. Anonymous callers vote by session or IP."""
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            target_type=TargetType.STOCK,
            target_id=stock_id,
            identity=resolve_identity(request, identity_service),
            direction=VoteDirection.UP,
        )
    )


@router.post("/{stock_id}/dislike", response_model=VoteResponse)
async def dislike_stock(
    stock_id: UUID,
    request: Request,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Dislike a stock. A previous like is switched."""
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            target_type=TargetType.STOCK,
            target_id=stock_id,
            identity=resolve_identity(request, identity_service),
            direction=VoteDirection.DOWN,
        )
    )


@router.delete("/{stock_id}/vote", response_model=VoteResponse)
async def remove_stock_vote(
    stock_id: UUID,
    request: Request,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    identity_service: FromDishka[IdentityService],
) -> VoteResponse:
    """Withdraw the caller's like or dislike."""
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            target_type=TargetType.STOCK,
            target_id=stock_id,
            identity=resolve_identity(request, identity_service),
        )
    )
