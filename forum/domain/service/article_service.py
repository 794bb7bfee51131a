"""Article domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.article import Article
from forum.domain.model.user import User
from forum.domain.repository import ArticleRepository
from forum.domain.value import ArticleCategory, ArticleId

from .base import Service

# Fields a merge-patch update may touch
EDITABLE_FIELDS = frozenset(
    {"title", "content", "excerpt", "category", "read_time", "is_published"}
)


class ArticleService(Service):
    """Domain service for editorial articles.

    Admin checks happen in the use cases; this service trusts its caller.
    """

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def create_article(
        self,
        author: User,
        title: str,
        content: str,
        excerpt: str,
        category: ArticleCategory,
        read_time: int,
        is_published: bool = False,
    ) -> Article:
        """Create an article, published immediately or as a draft."""
        with logfire.span("article_service.create_article", author_id=str(author.id)):
            now = datetime.now()
            article = Article(
                id=ArticleId(uuid4()),
                title=title.strip(),
                content=content.strip(),
                excerpt=excerpt.strip(),
                category=category,
                read_time=read_time,
                author_id=author.id,
                author_name=author.username.root,
                is_published=is_published,
                published_at=now if is_published else None,
                created_at=now,
                updated_at=now,
            )
            saved = await self.article_repository.save(article)
            logfire.info(
                "Article created", article_id=str(saved.id), is_published=is_published
            )
            return saved

    async def get_article(self, article_id: ArticleId) -> Article:
        """Get an article, drafts included.

        Raises:
            NotFoundError: If the article does not exist
        """
        article = await self.article_repository.find_by_id(article_id)
        if article is None:
            raise NotFoundError("Article", str(article_id))
        return article

    async def get_published_article(self, article_id: ArticleId) -> Article:
        """Get an article as the public sees it.

        Raises:
            NotFoundError: If the article does not exist or is a draft
        """
        article = await self.get_article(article_id)
        if not article.is_published:
            raise NotFoundError("Article", str(article_id))
        return article

    async def list_published(self) -> list[Article]:
        """List published articles, most recently published first."""
        with logfire.span("article_service.list_published"):
            articles = await self.article_repository.find_published()
            logfire.info("Published articles listed", count=len(articles))
            return articles

    async def list_all(self) -> list[Article]:
        """List every article including drafts, newest first."""
        return await self.article_repository.find_all()

    async def update_article(
        self, article_id: ArticleId, changes: dict[str, Any]
    ) -> Article:
        """Apply a merge-patch to an article.

        Publishing a draft stamps ``published_at``; unpublishing clears it.
        Republishing an already published article keeps its original date.

        Raises:
            NotFoundError: If the article does not exist
            ValidationError: If ``changes`` touches a read-only field
        """
        with logfire.span(
            "article_service.update_article",
            article_id=str(article_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(
                    f"Fields cannot be updated: {', '.join(sorted(unknown))}"
                )

            article = await self.get_article(article_id)
            now = datetime.now()
            data = {**article.model_dump(), **changes, "updated_at": now}
            for field_name in ("title", "content", "excerpt"):
                if isinstance(data[field_name], str):
                    data[field_name] = data[field_name].strip()

            if data["is_published"] and not article.is_published:
                data["published_at"] = now
            elif not data["is_published"]:
                data["published_at"] = None

            saved = await self.article_repository.update(Article.model_validate(data))
            logfire.info(
                "Article updated",
                article_id=str(article_id),
                is_published=saved.is_published,
            )
            return saved

    async def delete_article(self, article_id: ArticleId) -> None:
        """Delete an article.

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span("article_service.delete_article", article_id=str(article_id)):
            if not await self.article_repository.delete(article_id):
                raise NotFoundError("Article", str(article_id))
            logfire.info("Article deleted", article_id=str(article_id))
