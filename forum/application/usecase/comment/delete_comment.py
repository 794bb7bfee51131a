"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentAggregateService, CommentService, VoteService
from forum.domain.value import CommentId, Identity, TargetRef, TargetType


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID
    identity: Identity


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    comment_count: int  # Parent's comment count after the delete


class DeleteCommentUseCase:
    """Use case for deleting one's own comment."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        aggregate_service: CommentAggregateService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service, to drop the comment's votes
            aggregate_service: Keeps the parent's comment count and last comment
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.aggregate_service = aggregate_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Steps:
        1. Delete the comment (authorization checked by the service)
        2. Drop the votes cast on it
        3. Update the parent's aggregates, promoting a new last comment if needed

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller is not the author
        """
        comment = await self.comment_service.delete_comment(
            CommentId(request.comment_id), request.identity
        )
        await self.vote_service.purge_target(
            TargetRef(target_type=TargetType.COMMENT, target_id=comment.id)
        )
        count = await self.aggregate_service.on_comment_deleted(comment)

        return DeleteCommentResponse(comment_id=str(comment.id), comment_count=count)
