"""Delete portfolio use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService, PortfolioService, VoteService
from forum.domain.value import PortfolioId, TargetRef, TargetType, UserId


class DeletePortfolioRequest(BaseModel):
    """Delete portfolio request."""

    portfolio_id: UUID
    user_id: UUID  # Authenticated caller


class DeletePortfolioResponse(BaseModel):
    """Delete portfolio response."""

    portfolio_id: str
    deleted_comments: int


class DeletePortfolioUseCase:
    """Use case for deleting a portfolio post together with its discussion."""

    def __init__(
        self,
        portfolio_service: PortfolioService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete portfolio use case.

        Args:
            portfolio_service: Portfolio domain service
            comment_service: Comment service, to delete the post's comments
            vote_service: Vote service, to drop votes on the post and its comments
        """
        self.portfolio_service = portfolio_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeletePortfolioRequest) -> DeletePortfolioResponse:
        """Execute delete portfolio flow.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller is not the author
        """
        target = TargetRef(target_type=TargetType.PORTFOLIO, target_id=request.portfolio_id)
        comments = await self.comment_service.get_comments(target)

        post = await self.portfolio_service.delete_portfolio(
            PortfolioId(request.portfolio_id), UserId(request.user_id)
        )
        await self.comment_service.delete_for_parent(target)

        for comment in comments:
            await self.vote_service.purge_target(
                TargetRef(target_type=TargetType.COMMENT, target_id=comment.id)
            )
        await self.vote_service.purge_target(target)

        return DeletePortfolioResponse(
            portfolio_id=str(post.id), deleted_comments=len(comments)
        )
