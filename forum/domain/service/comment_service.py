"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import (
    ForbiddenError,
    NotFoundError,
    ParentNotFoundError,
    ValidationError,
)
from forum.domain.model.comment import Comment
from forum.domain.repository import CommentRepository, TargetRepository
from forum.domain.value import ANONYMOUS_LABEL, CommentId, Identity, TargetRef

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        target_repository: TargetRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            target_repository: Target repository, used to check parents exist
        """
        self.comment_repository = comment_repository
        self.target_repository = target_repository

    async def create_comment(
        self,
        parent: TargetRef,
        content: str,
        identity: Identity,
        author_name: str | None = None,
        parent_comment_id: CommentId | None = None,
        anonymous: bool = False,
    ) -> Comment:
        """Create a comment on a piece of content or reply to another comment.

        The comment is anonymous whenever the caller is anonymous or asks
        for anonymity; anonymous comments carry no author id.

        Args:
            parent: Content the comment belongs to
            content: Comment text (trimmed before saving)
            identity: Caller identity
            author_name: Display name of an authenticated author
            parent_comment_id: Parent comment ID for replies (None for top-level)
            anonymous: Post anonymously even when authenticated

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or the parent is not content
            NotFoundError: If the parent content does not exist
            ParentNotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            parent=str(parent),
            voter=str(identity),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            text = content.strip()
            if not text:
                raise ValidationError("Comment content is required")
            if not parent.target_type.is_content:
                raise ValidationError("Comments must belong to a stock, conversation or portfolio")

            is_anonymous = anonymous or identity.is_anonymous
            if not is_anonymous and not author_name:
                raise ValidationError("Author name is required")

            await self._ensure_parent_exists(parent)

            if parent_comment_id:
                parent_comment = await self.comment_repository.find_by_id(
                    parent_comment_id
                )
                if not parent_comment:
                    logfire.warn(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        parent=str(parent),
                    )
                    raise ParentNotFoundError(str(parent_comment_id))
                if parent_comment.parent != parent:
                    logfire.warn(
                        "Parent comment belongs to other content",
                        parent_comment_id=str(parent_comment_id),
                        comment_parent=str(parent_comment.parent),
                        parent=str(parent),
                    )
                    raise ValidationError("Parent comment does not belong to this content")

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                parent=parent,
                parent_comment_id=parent_comment_id,
                content=text,
                author_id=None if is_anonymous else identity.user_id,
                author_name=ANONYMOUS_LABEL if is_anonymous else author_name,
                anonymous_author_id=identity.fingerprint if is_anonymous else None,
                is_anonymous=is_anonymous,
                is_reply=parent_comment_id is not None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                parent=str(parent),
                is_anonymous=is_anonymous,
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comments(self, parent: TargetRef) -> list[Comment]:
        """Get the flat list of comments on a piece of content.

        Raises:
            NotFoundError: If the content does not exist
        """
        with logfire.span("comment_service.get_comments", parent=str(parent)):
            await self._ensure_parent_exists(parent)
            comments = await self.comment_repository.find_by_parent(parent)
            logfire.info(
                "Comments retrieved", parent=str(parent), count=len(comments)
            )
            return comments

    async def update_comment(
        self, comment_id: CommentId, identity: Identity, content: str
    ) -> Comment:
        """Replace the text of a comment owned by the caller.

        Raises:
            ValidationError: If the new content is empty
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller is not the comment's author
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=str(comment_id)
        ):
            text = content.strip()
            if not text:
                raise ValidationError("Comment content is required")

            comment = await self._get_owned(comment_id, identity)
            updated = await self.comment_repository.update_content(comment.id, text)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment text updated",
                comment_id=str(comment_id),
                text_length=len(text),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, identity: Identity) -> Comment:
        """Hard delete a comment owned by the caller.

        Replies stay in storage and are no longer reachable in the thread.

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the caller is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            comment = await self._get_owned(comment_id, identity)
            if not await self.comment_repository.delete(comment.id):
                # Removed by a concurrent request since it was read
                logfire.warn("Comment already deleted", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted", comment_id=str(comment_id), parent=str(comment.parent)
            )
            return comment

    async def delete_for_parent(self, parent: TargetRef) -> list[CommentId]:
        """Delete every comment on content that is itself being deleted."""
        with logfire.span("comment_service.delete_for_parent", parent=str(parent)):
            deleted = await self.comment_repository.delete_by_parent(parent)
            logfire.info("Comments deleted with parent", parent=str(parent), count=len(deleted))
            return deleted

    async def delete_all(self) -> int:
        """Delete every comment in the store."""
        with logfire.span("comment_service.delete_all"):
            deleted = await self.comment_repository.delete_all()
            logfire.warn("All comments deleted", count=deleted)
            return deleted

    async def _get_owned(self, comment_id: CommentId, identity: Identity) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))

        if (
            comment.is_anonymous
            or identity.is_anonymous
            or comment.author_id != identity.user_id
        ):
            logfire.warn(
                "Comment modification refused",
                comment_id=str(comment_id),
                actor=str(identity),
            )
            raise ForbiddenError("comment", str(comment_id), str(identity))

        return comment

    async def _ensure_parent_exists(self, parent: TargetRef) -> None:
        if not await self.target_repository.exists(parent):
            raise NotFoundError(
                parent.target_type.value.capitalize(), str(parent.target_id)
            )
