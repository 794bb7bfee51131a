"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentAggregateService, CommentService, UserService
from forum.domain.value import CommentId, Identity, TargetRef, TargetType

from .get_comments import CommentItem, comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    parent_type: TargetType
    parent_id: UUID
    content: str
    identity: Identity
    parent_comment_id: UUID | None = None  # Parent comment ID for replies
    anonymous: bool = False  # Post anonymously even when authenticated


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    comment_count: int  # Parent's comment count after the insert


class CreateCommentUseCase:
    """Use case for commenting on content or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        aggregate_service: CommentAggregateService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            aggregate_service: Keeps the parent's comment count and last comment
            user_service: User service, for the author's display name
        """
        self.comment_service = comment_service
        self.aggregate_service = aggregate_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Look up the author's username (authenticated, non-anonymous only)
        2. Create comment via comment service (validates parent and reply target)
        3. Update the parent's comment aggregates

        Args:
            request: Create comment request

        Returns:
            The created comment and the parent's new comment count

        Raises:
            ValidationError: If content is empty or the reply target is invalid
            NotFoundError: If the parent content, parent comment or author is missing
        """
        identity = request.identity
        author_name = None
        if not identity.is_anonymous and not request.anonymous:
            author = await self.user_service.require_user(identity.user_id)
            author_name = author.username.root

        comment = await self.comment_service.create_comment(
            parent=TargetRef(
                target_type=request.parent_type, target_id=request.parent_id
            ),
            content=request.content,
            identity=identity,
            author_name=author_name,
            parent_comment_id=CommentId(request.parent_comment_id)
            if request.parent_comment_id
            else None,
            anonymous=request.anonymous,
        )

        count = await self.aggregate_service.on_comment_created(comment)

        return CreateCommentResponse(comment=comment_item(comment), comment_count=count)
