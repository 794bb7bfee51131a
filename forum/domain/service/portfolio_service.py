"""Portfolio domain service."""

import math
from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.model.portfolio import PortfolioPost
from forum.domain.repository import PortfolioRepository
from forum.domain.value import PortfolioCategory, PortfolioId, PortfolioSort, UserId
from forum.domain.value.common import ValueObject

from .base import Service


class PortfolioPage(ValueObject):
    """One page of the portfolio feed."""

    posts: list[PortfolioPost]
    page: int
    total_pages: int
    total_count: int
    has_next_page: bool


class PortfolioService(Service):
    """Domain service for shared portfolios."""

    def __init__(self, portfolio_repository: PortfolioRepository) -> None:
        """Initialize portfolio service.

        Args:
            portfolio_repository: Portfolio repository
        """
        self.portfolio_repository = portfolio_repository

    async def create_portfolio(
        self,
        title: str,
        author_id: UserId,
        author_name: str,
        image_url: str,
        thumbnail_url: str | None = None,
        description: str | None = None,
        performance: str | None = None,
        category: PortfolioCategory = PortfolioCategory.OTHER,
    ) -> PortfolioPost:
        """Share a portfolio whose images are already in object storage.

        Raises:
            ValidationError: If the title or image URL is missing
        """
        with logfire.span("portfolio_service.create_portfolio", author_id=str(author_id)):
            title = title.strip()
            if not title:
                raise ValidationError("Portfolio title is required")
            if not image_url:
                raise ValidationError("Portfolio image is required")

            post = PortfolioPost(
                id=PortfolioId(uuid4()),
                title=title,
                description=description.strip() if description else None,
                author_id=author_id,
                author_name=author_name,
                image_url=image_url,
                thumbnail_url=thumbnail_url,
                performance=performance.strip() if performance else None,
                category=category,
                created_at=datetime.now(),
            )
            saved = await self.portfolio_repository.save(post)
            logfire.info(
                "Portfolio created", portfolio_id=str(saved.id), category=category.value
            )
            return saved

    async def get_portfolio(self, portfolio_id: PortfolioId) -> PortfolioPost:
        """Get a portfolio post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.portfolio_repository.find_by_id(portfolio_id)
        if post is None:
            raise NotFoundError("Portfolio", str(portfolio_id))
        return post

    async def list_portfolios(
        self,
        category: PortfolioCategory | None,
        sort: PortfolioSort,
        page: int,
        limit: int,
    ) -> PortfolioPage:
        """Get one page of approved portfolios.

        Args:
            category: Restrict to one category (None for all)
            sort: Feed ordering
            page: 1-based page number
            limit: Page size

        Returns:
            The page with pagination metadata
        """
        with logfire.span(
            "portfolio_service.list_portfolios",
            category=category.value if category else None,
            sort=sort.value,
            page=page,
            limit=limit,
        ):
            if page < 1 or limit < 1:
                raise ValidationError("page and limit must be positive")

            offset = (page - 1) * limit
            posts = await self.portfolio_repository.find_page(
                category=category, sort=sort, limit=limit, offset=offset
            )
            total = await self.portfolio_repository.count(category)
            return PortfolioPage(
                posts=posts,
                page=page,
                total_pages=math.ceil(total / limit),
                total_count=total,
                has_next_page=offset + len(posts) < total,
            )

    async def delete_portfolio(self, portfolio_id: PortfolioId, user_id: UserId) -> PortfolioPost:
        """Delete a portfolio post shared by the caller.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller is not the author
        """
        with logfire.span("portfolio_service.delete_portfolio", portfolio_id=str(portfolio_id)):
            post = await self.get_portfolio(portfolio_id)
            if post.author_id != user_id:
                logfire.warn(
                    "Portfolio deletion refused",
                    portfolio_id=str(portfolio_id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("portfolio", str(portfolio_id), f"user:{user_id}")

            await self.portfolio_repository.delete(portfolio_id)
            logfire.info("Portfolio deleted", portfolio_id=str(portfolio_id))
            return post
