"""Portfolio post.

Members share screenshots of their portfolios. Images are uploaded to
object storage elsewhere; posts only keep the resulting URLs.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import LastComment, PortfolioCategory, PortfolioId, UserId


class PortfolioPost(DomainModel):
    """Portfolio aggregate root with upvote/downvote counters."""

    id: PortfolioId
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    author_id: UserId
    author_name: str
    image_url: str
    thumbnail_url: Optional[str] = None
    performance: Optional[str] = Field(default=None, max_length=50)
    category: PortfolioCategory = PortfolioCategory.OTHER
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    last_comment: Optional[LastComment] = None
    is_premium: bool = False
    is_approved: bool = True
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def net_votes(self) -> int:
        return self.upvotes - self.downvotes
