"""List articles use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ArticleService, UserService
from forum.domain.value import UserId

from .get_article import ArticleItem, article_item


class ListArticlesRequest(BaseModel):
    """List articles request.

    Drafts are only listed for admins.
    """

    include_drafts: bool = False
    user_id: UUID | None = None  # Required with include_drafts


class ListArticlesResponse(BaseModel):
    """List articles response."""

    articles: list[ArticleItem]
    total: int


class ListArticlesUseCase:
    """Use case for the public article list and the admin list."""

    def __init__(
        self, article_service: ArticleService, user_service: UserService
    ) -> None:
        """Initialize list articles use case.

        Args:
            article_service: Article domain service
            user_service: User service for the admin check
        """
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute list articles flow.

        Raises:
            AdminRequiredError: If drafts are requested by a non-admin
            NotFoundError: If the requesting user does not exist
        """
        if request.include_drafts:
            if request.user_id is None:
                raise ValueError("user_id is required to list drafts")
            await self.user_service.require_admin(
                UserId(request.user_id), "list draft articles"
            )
            articles = await self.article_service.list_all()
        else:
            articles = await self.article_service.list_published()

        items = [article_item(article) for article in articles]
        return ListArticlesResponse(articles=items, total=len(items))
