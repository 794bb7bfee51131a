"""Editorial article.

Articles are written by admins and shown to everyone once published.
They are not votable and carry no comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import ArticleCategory, ArticleId, UserId


class Article(DomainModel):
    """Admin-authored article, visible to the public once published."""

    id: ArticleId
    title: str = Field(min_length=3, max_length=200)
    content: str = Field(min_length=10)
    excerpt: str = Field(min_length=1, max_length=300)
    category: ArticleCategory
    read_time: int = Field(ge=1)  # Minutes
    author_id: UserId
    author_name: str  # Denormalized from users
    is_published: bool = False
    published_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_publication(self) -> "Article":
        """Published articles have a publication date, drafts do not."""
        if self.is_published != (self.published_at is not None):
            raise ValueError("published_at must be set exactly when published")
        return self
