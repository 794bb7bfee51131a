"""Threaded comment tree construction."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId


@dataclass
class CommentNode:
    """A comment and the replies listed under it."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


def _chronological(node: CommentNode) -> tuple:
    return (node.comment.created_at, str(node.comment.id))


def _thread_roots(
    by_id: dict[CommentId, Comment],
) -> dict[CommentId, Optional[CommentId]]:
    """Map each comment to the top-level comment of its thread.

    Comments whose chain of parents breaks before reaching a top-level
    comment map to None. Each comment is visited once, whatever the depth.
    """
    root_of: dict[CommentId, Optional[CommentId]] = {}

    for comment in by_id.values():
        path: set[CommentId] = set()
        current = comment
        while True:
            if current.id in root_of:
                root = root_of[current.id]
                break
            path.add(current.id)
            if current.parent_comment_id is None:
                root = current.id
                break
            parent = by_id.get(current.parent_comment_id)
            if parent is None or parent.id in path:
                root = None
                break
            current = parent

        for comment_id in path:
            root_of[comment_id] = root

    return root_of


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Rebuild the two-level thread from a flat list of comments.

    Top-level comments come newest first. Every reply, however deep its
    chain of parents, is listed under the top-level comment of its thread,
    oldest first; it keeps its own ``parent_comment_id``. Replies whose
    chain reaches a missing comment are dropped from the tree. Equal
    timestamps are ordered by id, so the same input always yields the
    same tree.

    Args:
        comments: All comments of one piece of content, in any order

    Returns:
        Top-level nodes
    """
    by_id = {comment.id: comment for comment in comments}
    root_of = _thread_roots(by_id)

    roots: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment)
        for comment in by_id.values()
        if comment.parent_comment_id is None
    }
    for comment in by_id.values():
        root = root_of[comment.id]
        if comment.parent_comment_id is not None and root is not None:
            roots[root].replies.append(CommentNode(comment=comment))

    for node in roots.values():
        node.replies.sort(key=_chronological)
    return sorted(roots.values(), key=_chronological, reverse=True)
