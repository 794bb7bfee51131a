"""PostgreSQL implementation of Article repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Article
from forum.domain.repository import ArticleRepository
from forum.domain.value import ArticleId
from forum.persistence.mappers import article_to_dict, row_to_article
from forum.persistence.tables import articles_table

# Columns written by update(); authorship and creation time never change
EDITABLE_COLUMNS = (
    "title",
    "content",
    "excerpt",
    "category",
    "read_time",
    "is_published",
    "published_at",
)


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_published(self) -> List[Article]:
        """List published articles, most recently published first."""
        stmt = (
            select(articles_table)
            .where(articles_table.c.is_published.is_(True))
            .order_by(desc(articles_table.c.published_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Article]:
        """List every article, newest first."""
        stmt = select(articles_table).order_by(desc(articles_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def save(self, article: Article) -> Article:
        """Insert a new article."""
        stmt = insert(articles_table).values(**article_to_dict(article))
        await self.session.execute(stmt)
        await self.session.flush()
        return article

    async def update(self, article: Article) -> Article:
        """Persist the editable fields and publication state of an article."""
        article_dict = article_to_dict(article)
        values = {column: article_dict[column] for column in EDITABLE_COLUMNS}
        values["updated_at"] = datetime.now()

        stmt = (
            update(articles_table)
            .where(articles_table.c.id == article.id)
            .values(**values)
            .returning(articles_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_article(row._asdict()) if row else article

    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article, reporting whether a row was removed."""
        stmt = (
            delete(articles_table)
            .where(articles_table.c.id == article_id)
            .returning(articles_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.scalar_one_or_none() is not None
        await self.session.flush()
        return deleted
