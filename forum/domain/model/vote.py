"""Vote entity.

One row per (target, voter). Switching direction updates the row in place.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import Identity, TargetRef, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per identity per target (partial unique indexes per identity kind)
    - A voter is either an authenticated user or an anonymous fingerprint
    """

    id: VoteId
    target: TargetRef
    voter: Identity
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
