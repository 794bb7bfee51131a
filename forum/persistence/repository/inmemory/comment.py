"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, TargetRef

from .store import InMemoryStore, round_trip


def _newest_first(comment: Comment) -> tuple:
    return (comment.created_at, str(comment.id))


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        await round_trip()
        return self._store.comments.get(comment_id)

    async def find_by_parent(self, parent: TargetRef) -> list[Comment]:
        """Find all comments on a piece of content, newest first."""
        comments = [c for c in self._store.comments.values() if c.parent == parent]
        comments.sort(key=_newest_first, reverse=True)
        return comments

    async def find_latest_by_parent(self, parent: TargetRef) -> Optional[Comment]:
        """Find the most recent comment on a piece of content."""
        comments = await self.find_by_parent(parent)
        return comments[0] if comments else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the text of a comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._store.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        await round_trip()
        return self._store.comments.pop(comment_id, None) is not None

    async def delete_by_parent(self, parent: TargetRef) -> list[CommentId]:
        """Delete every comment on a piece of content."""
        doomed = [c.id for c in self._store.comments.values() if c.parent == parent]
        for comment_id in doomed:
            del self._store.comments[comment_id]
        return doomed

    async def delete_all(self) -> int:
        """Delete every comment."""
        count = len(self._store.comments)
        self._store.comments.clear()
        return count
