"""Get article use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Article
from forum.domain.service import ArticleService
from forum.domain.value import ArticleCategory, ArticleId


class ArticleItem(BaseModel):
    """Article in response."""

    article_id: str
    title: str
    content: str
    excerpt: str
    category: ArticleCategory
    read_time: int
    author_id: str
    author_name: str
    is_published: bool
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime


def article_item(article: Article) -> ArticleItem:
    """Build the response item for an article."""
    return ArticleItem(
        article_id=str(article.id),
        title=article.title,
        content=article.content,
        excerpt=article.excerpt,
        category=article.category,
        read_time=article.read_time,
        author_id=str(article.author_id),
        author_name=article.author_name,
        is_published=article.is_published,
        published_at=article.published_at,
        created_at=article.created_at,
        updated_at=article.updated_at,
    )


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: UUID


class GetArticleUseCase:
    """Use case for reading a published article."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize get article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: GetArticleRequest) -> ArticleItem:
        """Execute get article flow.

        Raises:
            NotFoundError: If the article does not exist or is a draft
        """
        article = await self.article_service.get_published_article(
            ArticleId(request.article_id)
        )
        return article_item(article)
