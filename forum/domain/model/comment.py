"""Comment entity.

Comments hang off exactly one piece of content (stock, conversation or
portfolio post). Replies point at their parent comment; the thread is
rebuilt from the flat list on every read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, TargetRef, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent: the content the comment belongs to
    - parent_comment_id: direct parent comment (None for top-level)
    """

    id: CommentId
    parent: TargetRef
    parent_comment_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=10000)
    author_id: Optional[UserId] = None
    author_name: str
    anonymous_author_id: Optional[str] = None
    is_anonymous: bool = False
    is_reply: bool = False
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_attribution(self) -> "Comment":
        """Check parent kind and single attribution."""
        if not self.parent.target_type.is_content:
            raise ValueError("Comments must belong to a stock, conversation or portfolio")
        if self.is_anonymous and self.author_id is not None:
            raise ValueError("Anonymous comments cannot have an author")
        if not self.is_anonymous and self.author_id is None:
            raise ValueError("Non-anonymous comments require an author")
        if self.is_reply != (self.parent_comment_id is not None):
            raise ValueError("is_reply must match parent_comment_id")
        return self
