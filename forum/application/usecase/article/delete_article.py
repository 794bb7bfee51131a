"""Delete article use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ArticleService, UserService
from forum.domain.value import ArticleId, UserId


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    article_id: UUID
    user_id: UUID


class DeleteArticleResponse(BaseModel):
    """Delete article response."""

    article_id: str


class DeleteArticleUseCase:
    """Use case for deleting an article. Admins only."""

    def __init__(
        self, article_service: ArticleService, user_service: UserService
    ) -> None:
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: DeleteArticleRequest) -> DeleteArticleResponse:
        """Execute delete article flow.

        Raises:
            AdminRequiredError: If the caller is not an admin
            NotFoundError: If the article does not exist
        """
        await self.user_service.require_admin(
            UserId(request.user_id), "delete articles"
        )
        await self.article_service.delete_article(ArticleId(request.article_id))
        return DeleteArticleResponse(article_id=str(request.article_id))
