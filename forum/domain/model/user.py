"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, Username


class User(DomainModel):
    """Registered forum member.

    Credentials live with the external auth service; the forum only keeps
    the public profile used to label authored content.
    """

    id: UserId
    username: Username
    email: Optional[str] = None
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
