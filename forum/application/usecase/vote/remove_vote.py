"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import VoteService
from forum.domain.value import Identity, TargetRef, TargetType

from .apply_vote import VoteResponse, vote_response


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    target_type: TargetType
    target_id: UUID
    identity: Identity


class RemoveVoteUseCase:
    """Use case for withdrawing a vote from any target."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> VoteResponse:
        """Execute remove vote flow.

        Raises:
            NotFoundError: If the target does not exist
            NoVoteFoundError: If the caller has not voted on the target
        """
        result = await self.vote_service.remove_vote(
            target=TargetRef(target_type=request.target_type, target_id=request.target_id),
            identity=request.identity,
        )
        return vote_response(result)
