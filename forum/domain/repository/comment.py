"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, TargetRef


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_parent(self, parent: TargetRef) -> List[Comment]:
        """Find all comments (top-level and replies) on a piece of content.

        Args:
            parent: Content reference

        Returns:
            Flat list of comments, newest first
        """
        pass

    @abstractmethod
    async def find_latest_by_parent(self, parent: TargetRef) -> Optional[Comment]:
        """Find the most recent comment on a piece of content.

        Args:
            parent: Content reference

        Returns:
            The newest comment, or None if there are none
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the text of a comment.

        Args:
            comment_id: Comment ID
            content: New text

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a single comment. Replies are left in place.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if it was already gone
        """
        pass

    @abstractmethod
    async def delete_by_parent(self, parent: TargetRef) -> List[CommentId]:
        """Delete every comment on a piece of content.

        Args:
            parent: Content reference

        Returns:
            IDs of the deleted comments
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every comment.

        Returns:
            Number of comments deleted
        """
        pass
