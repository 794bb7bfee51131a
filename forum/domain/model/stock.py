"""Stock listing.

Stocks are the main discussion targets. Market fields are sparse: anything
not supplied on update is left unchanged.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import LastComment, StockId, UserId


class Stock(DomainModel):
    """Stock aggregate root with like/dislike counters and comment aggregates."""

    id: StockId
    symbol: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    exchange: Optional[str] = None
    currency: Optional[str] = None
    current_price: float
    previous_close: Optional[float] = None
    percent_change: float
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    last_comment: Optional[LastComment] = None
    created_by: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("symbol", mode="before")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        """Symbols are stored trimmed and upper-cased."""
        return v.strip().upper() if isinstance(v, str) else v
