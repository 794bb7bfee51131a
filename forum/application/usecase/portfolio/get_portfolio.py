"""Get portfolio use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import PortfolioPost
from forum.domain.service import PortfolioService, VoteService
from forum.domain.value import (
    Identity,
    LastComment,
    PortfolioCategory,
    PortfolioId,
    TargetRef,
    TargetType,
    VoteDirection,
)


class PortfolioItem(BaseModel):
    """Portfolio post in response."""

    portfolio_id: str
    title: str
    description: str | None
    author_id: str
    author_name: str
    image_url: str
    thumbnail_url: str | None
    performance: str | None
    category: PortfolioCategory
    upvotes: int
    downvotes: int
    net_votes: int
    comment_count: int
    last_comment: LastComment | None
    is_premium: bool
    created_at: datetime
    user_vote: VoteDirection | None = None


def portfolio_item(
    post: PortfolioPost, user_vote: VoteDirection | None = None
) -> PortfolioItem:
    """Build the response item for a portfolio post."""
    return PortfolioItem(
        portfolio_id=str(post.id),
        title=post.title,
        description=post.description,
        author_id=str(post.author_id),
        author_name=post.author_name,
        image_url=post.image_url,
        thumbnail_url=post.thumbnail_url,
        performance=post.performance,
        category=post.category,
        upvotes=post.upvotes,
        downvotes=post.downvotes,
        net_votes=post.net_votes,
        comment_count=post.comment_count,
        last_comment=post.last_comment,
        is_premium=post.is_premium,
        created_at=post.created_at,
        user_vote=user_vote,
    )


class GetPortfolioRequest(BaseModel):
    """Get portfolio request."""

    portfolio_id: UUID
    identity: Identity


class GetPortfolioUseCase:
    """Use case for getting a portfolio post with the viewer's vote."""

    def __init__(
        self, portfolio_service: PortfolioService, vote_service: VoteService
    ) -> None:
        """Initialize get portfolio use case.

        Args:
            portfolio_service: Portfolio domain service
            vote_service: Vote service for the viewer's vote
        """
        self.portfolio_service = portfolio_service
        self.vote_service = vote_service

    async def execute(self, request: GetPortfolioRequest) -> PortfolioItem:
        """Execute get portfolio flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.portfolio_service.get_portfolio(
            PortfolioId(request.portfolio_id)
        )
        user_vote = await self.vote_service.get_viewer_vote(
            TargetRef(target_type=TargetType.PORTFOLIO, target_id=post.id),
            request.identity,
        )
        return portfolio_item(post, user_vote)
