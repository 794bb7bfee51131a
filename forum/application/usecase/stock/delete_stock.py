"""Delete stock use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService, StockService, VoteService
from forum.domain.value import StockId, TargetRef, TargetType, UserId


class DeleteStockRequest(BaseModel):
    """Delete stock request."""

    stock_id: UUID
    user_id: UUID  # Authenticated caller


class DeleteStockResponse(BaseModel):
    """Delete stock response."""

    stock_id: str
    symbol: str
    deleted_comments: int


class DeleteStockUseCase:
    """Use case for deleting a stock together with its discussion."""

    def __init__(
        self,
        stock_service: StockService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete stock use case.

        Args:
            stock_service: Stock domain service
            comment_service: Comment service, to delete the stock's comments
            vote_service: Vote service, to drop votes on the stock and its comments
        """
        self.stock_service = stock_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteStockRequest) -> DeleteStockResponse:
        """Execute delete stock flow.

        Comments are read before the stock row goes away, since the
        database cascades the delete to them.

        Raises:
            NotFoundError: If the stock does not exist
            ForbiddenError: If the caller did not create the stock
        """
        target = TargetRef(target_type=TargetType.STOCK, target_id=request.stock_id)
        comments = await self.comment_service.get_comments(target)

        stock = await self.stock_service.delete_stock(
            StockId(request.stock_id), UserId(request.user_id)
        )
        await self.comment_service.delete_for_parent(target)

        for comment in comments:
            await self.vote_service.purge_target(
                TargetRef(target_type=TargetType.COMMENT, target_id=comment.id)
            )
        await self.vote_service.purge_target(target)

        return DeleteStockResponse(
            stock_id=str(stock.id), symbol=stock.symbol, deleted_comments=len(comments)
        )
