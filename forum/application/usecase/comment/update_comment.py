"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import CommentId, Identity

from .get_comments import CommentItem, comment_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: UUID
    identity: Identity
    content: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing the text of one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ValidationError: If the new content is empty
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller is not the author
        """
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(request.comment_id),
            identity=request.identity,
            content=request.content,
        )
        return UpdateCommentResponse(comment=comment_item(comment))
