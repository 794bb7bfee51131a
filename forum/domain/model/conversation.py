"""Conversation entity.

Free-form discussion posts that anyone, including anonymous visitors,
can start.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import ConversationId, LastComment, UserId


class Conversation(DomainModel):
    """Discussion thread with like/dislike counters and comment aggregates."""

    id: ConversationId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    author_id: Optional[UserId] = None
    author_name: str
    anonymous_author_id: Optional[str] = None
    is_anonymous: bool = False
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    last_comment: Optional[LastComment] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_attribution(self) -> "Conversation":
        """An anonymous conversation never carries an author id."""
        if self.is_anonymous and self.author_id is not None:
            raise ValueError("Anonymous conversations cannot have an author")
        if not self.is_anonymous and self.author_id is None:
            raise ValueError("Non-anonymous conversations require an author")
        return self
