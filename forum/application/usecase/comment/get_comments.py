"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Comment
from forum.domain.service import CommentService, VoteService
from forum.domain.service.comment_tree import build_comment_tree
from forum.domain.value import Identity, TargetRef, TargetType, VoteDirection


class CommentItem(BaseModel):
    """Comment item in response; top-level items carry their thread's replies."""

    comment_id: str
    parent_type: TargetType
    parent_id: str
    parent_comment_id: str | None
    content: str
    author_id: str | None
    author_name: str
    is_anonymous: bool
    is_reply: bool
    likes: int
    dislikes: int
    user_vote: VoteDirection | None = None
    created_at: datetime
    updated_at: datetime
    replies: list["CommentItem"] = []


def comment_item(
    comment: Comment,
    user_vote: VoteDirection | None = None,
    replies: list[CommentItem] | None = None,
) -> CommentItem:
    """Build the response item for a comment."""
    return CommentItem(
        comment_id=str(comment.id),
        parent_type=comment.parent.target_type,
        parent_id=str(comment.parent.target_id),
        parent_comment_id=str(comment.parent_comment_id)
        if comment.parent_comment_id
        else None,
        content=comment.content,
        author_id=str(comment.author_id) if comment.author_id else None,
        author_name=comment.author_name,
        is_anonymous=comment.is_anonymous,
        is_reply=comment.is_reply,
        likes=comment.likes,
        dislikes=comment.dislikes,
        user_vote=user_vote,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        replies=replies or [],
    )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    parent_type: TargetType
    parent_id: UUID
    identity: Identity  # Viewer, for per-comment vote state


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    parent_type: TargetType
    parent_id: str
    comments: list[CommentItem]  # Top-level comments, newest first
    total: int  # Every stored comment, including unreachable replies


class GetCommentsUseCase:
    """Use case for getting the threaded comments of a piece of content."""

    def __init__(self, comment_service: CommentService, vote_service: VoteService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service for the viewer's votes
        """
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Parent content and viewer identity

        Returns:
            The comment tree with the viewer's vote on each comment

        Raises:
            NotFoundError: If the parent content does not exist
        """
        parent = TargetRef(target_type=request.parent_type, target_id=request.parent_id)
        comments = await self.comment_service.get_comments(parent)

        votes = await self.vote_service.get_viewer_votes(
            identity=request.identity,
            target_type=TargetType.COMMENT,
            target_ids=[comment.id for comment in comments],
        )

        items = [
            comment_item(
                node.comment,
                user_vote=votes.get(node.comment.id),
                replies=[
                    comment_item(reply.comment, user_vote=votes.get(reply.comment.id))
                    for reply in node.replies
                ],
            )
            for node in build_comment_tree(comments)
        ]

        return GetCommentsResponse(
            parent_type=request.parent_type,
            parent_id=str(request.parent_id),
            comments=items,
            total=len(comments),
        )
