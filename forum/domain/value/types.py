"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by comments, votes and content.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from forum.domain.error import ValidationError
from forum.domain.value.common import RootValueObject, ValueObject
from forum.domain.value.identifiers import CommentId, UserId

ANONYMOUS_LABEL = "Anonymous"
EXCERPT_LIMIT = 200
# Longer anonymous fingerprints are stored as a digest
FINGERPRINT_LIMIT = 128


class TargetType(str, Enum):
    """Kind of entity a vote or comment can be attached to."""

    STOCK = "stock"
    CONVERSATION = "conversation"
    PORTFOLIO = "portfolio"
    COMMENT = "comment"

    @property
    def is_content(self) -> bool:
        """Whether this type can parent comments."""
        return self is not TargetType.COMMENT


class VoteDirection(str, Enum):
    """Direction of a vote.

    Stocks, conversations and comments call these likes/dislikes,
    portfolio posts call them upvotes/downvotes.
    """

    UP = "up"
    DOWN = "down"


class IdentityKind(str, Enum):
    """How a caller was identified."""

    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class PortfolioCategory(str, Enum):
    """Category of a shared portfolio."""

    YOLO = "YOLO"
    LOSSES = "LOSSES"
    BOOMER = "BOOMER"
    GAINS = "GAINS"
    CRYPTO = "CRYPTO"
    OPTIONS = "OPTIONS"
    OTHER = "OTHER"


class ArticleCategory(str, Enum):
    """Editorial section of an article."""

    MARKET_ANALYSIS = "Market Analysis"
    STOCK_PICKS = "Stock Picks"
    TRADING_TIPS = "Trading Tips"
    NEWS = "News"
    EDUCATION = "Education"


class PortfolioSort(str, Enum):
    """Ordering of the portfolio feed."""

    HOT = "hot"
    NEW = "new"
    TOP = "top"
    CONTROVERSIAL = "controversial"


class Username(RootValueObject[str]):
    """Public username, 3-30 characters of letters, digits and underscores."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not re.match(r"^[A-Za-z0-9_]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits or underscores"
            )
        return v


class TargetRef(ValueObject):
    """Reference to a votable or commentable entity."""

    target_type: TargetType
    target_id: UUID

    @classmethod
    def from_parent_ids(
        cls,
        stock_id: Optional[UUID] = None,
        conversation_id: Optional[UUID] = None,
        portfolio_id: Optional[UUID] = None,
    ) -> "TargetRef":
        """Build a content reference from the three optional parent ids.

        Raises:
            ValidationError: If zero or more than one parent id is given
        """
        candidates = [
            (TargetType.STOCK, stock_id),
            (TargetType.CONVERSATION, conversation_id),
            (TargetType.PORTFOLIO, portfolio_id),
        ]
        present = [(t, i) for t, i in candidates if i is not None]
        if len(present) != 1:
            raise ValidationError(
                "Exactly one of stock_id, conversation_id or portfolio_id is required"
            )
        target_type, target_id = present[0]
        return cls(target_type=target_type, target_id=target_id)

    def __str__(self) -> str:
        return f"{self.target_type.value} {self.target_id}"


class Identity(ValueObject):
    """The voting and authorship key of a caller.

    Exactly one of ``user_id`` (authenticated) or ``fingerprint``
    (anonymous) is set.
    """

    kind: IdentityKind
    user_id: Optional[UserId] = None
    fingerprint: Optional[str] = None

    @model_validator(mode="after")
    def check_single_key(self) -> "Identity":
        if self.kind == IdentityKind.AUTHENTICATED:
            if self.user_id is None or self.fingerprint is not None:
                raise ValueError("Authenticated identity requires only a user_id")
        else:
            if not self.fingerprint or self.user_id is not None:
                raise ValueError("Anonymous identity requires only a fingerprint")
        return self

    @classmethod
    def authenticated(cls, user_id: UserId) -> "Identity":
        return cls(kind=IdentityKind.AUTHENTICATED, user_id=user_id)

    @classmethod
    def anonymous(cls, fingerprint: str) -> "Identity":
        return cls(kind=IdentityKind.ANONYMOUS, fingerprint=fingerprint)

    @property
    def is_anonymous(self) -> bool:
        return self.kind == IdentityKind.ANONYMOUS

    def __str__(self) -> str:
        if self.is_anonymous:
            return f"anonymous:{self.fingerprint}"
        return f"user:{self.user_id}"


class VoteTally(ValueObject):
    """Up and down counters of a target."""

    up: int = Field(default=0, ge=0)
    down: int = Field(default=0, ge=0)

    @property
    def net(self) -> int:
        return self.up - self.down


class LastComment(ValueObject):
    """Snapshot of the newest comment, stored on its parent content."""

    content: str = Field(max_length=EXCERPT_LIMIT)
    author: str
    author_id: Optional[UserId] = None
    date: datetime
    comment_id: CommentId
