"""Apply vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import VoteService
from forum.domain.service.vote_service import VoteResult
from forum.domain.value import Identity, TargetRef, TargetType, VoteDirection


class VoteResponse(BaseModel):
    """Vote state of a target after a ledger operation."""

    target_type: TargetType
    target_id: str
    user_vote: VoteDirection | None  # Caller's vote, None after removal
    up: int
    down: int
    net: int


def vote_response(result: VoteResult) -> VoteResponse:
    """Build the response for a ledger result."""
    return VoteResponse(
        target_type=result.target.target_type,
        target_id=str(result.target.target_id),
        user_vote=result.direction,
        up=result.tally.up,
        down=result.tally.down,
        net=result.tally.net,
    )


class ApplyVoteRequest(BaseModel):
    """Apply vote request."""

    target_type: TargetType
    target_id: UUID
    identity: Identity
    direction: VoteDirection


class ApplyVoteUseCase:
    """Use case for casting or switching a vote on any target."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize apply vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ApplyVoteRequest) -> VoteResponse:
        """Execute apply vote flow.

        Args:
            request: Apply vote request

        Returns:
            The target's counters and the caller's vote

        Raises:
            NotFoundError: If the target does not exist
            DuplicateVoteError: If the caller already voted this way
        """
        result = await self.vote_service.apply_vote(
            target=TargetRef(target_type=request.target_type, target_id=request.target_id),
            identity=request.identity,
            direction=request.direction,
        )
        return vote_response(result)
