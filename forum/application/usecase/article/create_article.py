"""Create article use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import ArticleService, UserService
from forum.domain.value import ArticleCategory, UserId

from .get_article import ArticleItem, article_item


class CreateArticleRequest(BaseModel):
    """Create article request."""

    title: str
    content: str
    excerpt: str
    category: ArticleCategory
    read_time: int
    is_published: bool = False
    user_id: UUID  # Authenticated author


class CreateArticleUseCase:
    """Use case for writing an article. Admins only."""

    def __init__(
        self, article_service: ArticleService, user_service: UserService
    ) -> None:
        """Initialize create article use case.

        Args:
            article_service: Article domain service
            user_service: User service for the admin check and author name
        """
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: CreateArticleRequest) -> ArticleItem:
        """Execute create article flow.

        Raises:
            AdminRequiredError: If the author is not an admin
            NotFoundError: If the author does not exist
        """
        author = await self.user_service.require_admin(
            UserId(request.user_id), "create articles"
        )
        article = await self.article_service.create_article(
            author=author,
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            category=request.category,
            read_time=request.read_time,
            is_published=request.is_published,
        )
        return article_item(article)
