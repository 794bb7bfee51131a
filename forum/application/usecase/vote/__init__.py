"""Vote use cases."""

from .apply_vote import ApplyVoteRequest, ApplyVoteUseCase, VoteResponse
from .remove_vote import RemoveVoteRequest, RemoveVoteUseCase

__all__ = [
    "ApplyVoteRequest",
    "ApplyVoteUseCase",
    "RemoveVoteRequest",
    "RemoveVoteUseCase",
    "VoteResponse",
]
