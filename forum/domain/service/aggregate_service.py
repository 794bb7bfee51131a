"""Comment aggregate maintenance.

The only writer of ``comment_count`` and ``last_comment`` on content.
"""

import logfire

from forum.domain.model.comment import Comment
from forum.domain.repository import CommentRepository, TargetRepository
from forum.domain.value import EXCERPT_LIMIT, LastComment

from .base import Service


def make_excerpt(content: str) -> str:
    """Shorten comment text to fit the last-comment snapshot."""
    if len(content) > EXCERPT_LIMIT:
        return content[: EXCERPT_LIMIT - 3] + "..."
    return content


def snapshot_of(comment: Comment) -> LastComment:
    """Build the last-comment snapshot for a comment."""
    return LastComment(
        content=make_excerpt(comment.content),
        author=comment.author_name,
        author_id=comment.author_id,
        date=comment.created_at,
        comment_id=comment.id,
    )


def _not_older(comment: Comment, current: LastComment) -> bool:
    # Snapshots promoted from storage carry aware timestamps
    return comment.created_at.astimezone() >= current.date.astimezone()


class CommentAggregateService(Service):
    """Keeps content summaries consistent with the comment store."""

    def __init__(
        self,
        target_repository: TargetRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize aggregate service.

        Args:
            target_repository: Target repository holding the aggregates
            comment_repository: Comment repository, used to find survivors
        """
        self.target_repository = target_repository
        self.comment_repository = comment_repository

    async def on_comment_created(self, comment: Comment) -> int:
        """Count a new comment and make it the parent's last comment.

        A comment older than the current snapshot leaves the snapshot alone;
        concurrent creates may reach the lock out of order.

        Returns:
            The parent's new comment count
        """
        parent = comment.parent
        with logfire.span(
            "aggregate_service.on_comment_created",
            parent=str(parent),
            comment_id=str(comment.id),
        ):
            async with self.target_repository.lock(parent):
                count = await self.target_repository.adjust_comment_count(parent, 1)
                current = await self.target_repository.get_last_comment(parent)
                if current is None or _not_older(comment, current):
                    await self.target_repository.set_last_comment(
                        parent, snapshot_of(comment)
                    )
            logfire.info("Comment aggregate incremented", parent=str(parent), count=count)
            return count

    async def on_comment_deleted(self, comment: Comment) -> int:
        """Uncount a deleted comment and promote a survivor if needed.

        When the deleted comment was the parent's last comment, the most
        recent remaining comment takes its place, or the slot is cleared.

        Returns:
            The parent's new comment count
        """
        parent = comment.parent
        with logfire.span(
            "aggregate_service.on_comment_deleted",
            parent=str(parent),
            comment_id=str(comment.id),
        ):
            async with self.target_repository.lock(parent):
                count = await self.target_repository.adjust_comment_count(parent, -1)

                current = await self.target_repository.get_last_comment(parent)
                if current is not None and current.comment_id == comment.id:
                    survivor = await self.comment_repository.find_latest_by_parent(
                        parent
                    )
                    await self.target_repository.set_last_comment(
                        parent, snapshot_of(survivor) if survivor else None
                    )
                    logfire.info(
                        "Last comment promoted",
                        parent=str(parent),
                        promoted=str(survivor.id) if survivor else None,
                    )

            logfire.info("Comment aggregate decremented", parent=str(parent), count=count)
            return count

    async def reset_all(self) -> int:
        """Zero every content aggregate.

        Returns:
            Number of content rows reset
        """
        with logfire.span("aggregate_service.reset_all"):
            touched = await self.target_repository.reset_aggregates()
            logfire.warn("Comment aggregates reset", targets=touched)
            return touched
