"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.article import Article
from forum.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article entity."""

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID, published or not."""
        pass

    @abstractmethod
    async def find_published(self) -> List[Article]:
        """List published articles, most recently published first."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Article]:
        """List every article including drafts, newest first."""
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Insert a new article."""
        pass

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Persist the editable fields and publication state of an article."""
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article.

        Returns:
            True if an article was deleted, False if it was already gone
        """
        pass
