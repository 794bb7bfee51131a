"""Update article use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ArticleService, UserService
from forum.domain.value import ArticleId, UserId

from .get_article import ArticleItem, article_item


class UpdateArticleRequest(BaseModel):
    """Update article request.

    ``changes`` holds only the fields the client sent.
    """

    article_id: UUID
    changes: dict[str, Any]
    user_id: UUID


class UpdateArticleUseCase:
    """Use case for editing, publishing or unpublishing an article. Admins only."""

    def __init__(
        self, article_service: ArticleService, user_service: UserService
    ) -> None:
        """Initialize update article use case.

        Args:
            article_service: Article domain service
            user_service: User service for the admin check
        """
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: UpdateArticleRequest) -> ArticleItem:
        """Execute update article flow.

        Raises:
            AdminRequiredError: If the caller is not an admin
            NotFoundError: If the article does not exist
        """
        await self.user_service.require_admin(UserId(request.user_id), "edit articles")
        article = await self.article_service.update_article(
            ArticleId(request.article_id), request.changes
        )
        return article_item(article)
