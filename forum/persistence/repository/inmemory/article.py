"""In-memory article repository for testing."""

from datetime import datetime
from typing import Optional

from forum.domain.model.article import Article
from forum.domain.repository.article import ArticleRepository
from forum.domain.value import ArticleId

from .store import InMemoryStore, round_trip

EDITABLE_FIELDS = (
    "title",
    "content",
    "excerpt",
    "category",
    "read_time",
    "is_published",
    "published_at",
)


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._store.articles.get(article_id)

    async def find_published(self) -> list[Article]:
        """List published articles, most recently published first."""
        published = [a for a in self._store.articles.values() if a.is_published]
        published.sort(key=lambda a: a.published_at, reverse=True)
        return published

    async def find_all(self) -> list[Article]:
        """List every article, newest first."""
        return sorted(
            self._store.articles.values(), key=lambda a: a.created_at, reverse=True
        )

    async def save(self, article: Article) -> Article:
        """Save a new article."""
        self._store.articles[article.id] = article
        return article

    async def update(self, article: Article) -> Article:
        """Persist the editable fields and publication state of an article."""
        current = self._store.articles.get(article.id)
        if current is None:
            return article

        changes = {name: getattr(article, name) for name in EDITABLE_FIELDS}
        changes["updated_at"] = datetime.now()
        updated = current.model_copy(update=changes)
        self._store.articles[article.id] = updated
        return updated

    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article, reporting whether it was still there."""
        await round_trip()
        return self._store.articles.pop(article_id, None) is not None
