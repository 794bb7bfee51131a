"""Unit tests for comment tree construction."""

from uuid import UUID, uuid4

from forum.domain.service.comment_tree import build_comment_tree
from forum.domain.value import CommentId, TargetRef, TargetType
from tests.conftest import make_comment, make_user

PARENT = TargetRef(target_type=TargetType.STOCK, target_id=uuid4())


def _ids(nodes) -> list[CommentId]:
    return [node.comment.id for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_gives_empty_tree(self):
        """No comments, no nodes."""
        assert build_comment_tree([]) == []

    def test_top_level_newest_first_replies_oldest_first(self):
        """Top-level comments are newest first; replies read chronologically."""
        # Arrange
        old_top = make_comment(PARENT, minutes=0)
        new_top = make_comment(PARENT, minutes=10)
        late_reply = make_comment(PARENT, parent_comment_id=old_top.id, minutes=8)
        early_reply = make_comment(PARENT, parent_comment_id=old_top.id, minutes=2)

        # Act
        roots = build_comment_tree([old_top, late_reply, new_top, early_reply])

        # Assert
        assert _ids(roots) == [new_top.id, old_top.id]
        assert _ids(roots[1].replies) == [early_reply.id, late_reply.id]
        assert roots[0].replies == []

    def test_replies_to_replies_join_their_thread(self):
        """A reply to a reply is listed under the top-level comment."""
        # Arrange
        top = make_comment(PARENT, minutes=0)
        reply = make_comment(PARENT, parent_comment_id=top.id, minutes=1)
        nested = make_comment(PARENT, parent_comment_id=reply.id, minutes=2)

        # Act
        roots = build_comment_tree([nested, reply, top])

        # Assert
        assert _ids(roots) == [top.id]
        assert _ids(roots[0].replies) == [reply.id, nested.id]
        assert roots[0].replies[1].comment.parent_comment_id == reply.id
        assert roots[0].replies[0].replies == []

    def test_orphaned_replies_are_dropped(self):
        """A reply whose parent comment is gone does not appear anywhere."""
        # Arrange
        top = make_comment(PARENT, minutes=0)
        orphan = make_comment(PARENT, parent_comment_id=CommentId(uuid4()), minutes=5)
        orphan_child = make_comment(PARENT, parent_comment_id=orphan.id, minutes=6)

        # Act
        roots = build_comment_tree([top, orphan, orphan_child])

        # Assert
        assert _ids(roots) == [top.id]
        assert roots[0].replies == []

    def test_equal_timestamps_are_ordered_by_id(self):
        """Ties on created_at are broken by id so output is stable."""
        # Arrange
        author = make_user()
        first = make_comment(PARENT, author=author, minutes=3)
        second = make_comment(PARENT, author=author, minutes=3)
        first = first.model_copy(update={"id": CommentId(UUID(int=1))})
        second = second.model_copy(update={"id": CommentId(UUID(int=2))})

        # Act
        forward = build_comment_tree([first, second])
        backward = build_comment_tree([second, first])

        # Assert
        assert _ids(forward) == _ids(backward) == [second.id, first.id]

    def test_building_twice_gives_the_same_tree(self):
        """The builder has no hidden state between calls."""
        # Arrange
        top = make_comment(PARENT, minutes=0)
        reply = make_comment(PARENT, parent_comment_id=top.id, minutes=1)

        # Act
        first = build_comment_tree([top, reply])
        second = build_comment_tree([top, reply])

        # Assert
        assert _ids(first) == _ids(second)
        assert _ids(first[0].replies) == _ids(second[0].replies)
        assert len(first[0].replies) == 1

    def test_deep_reply_chain_does_not_recurse(self):
        """A chain far deeper than the interpreter's recursion limit still builds."""
        # Arrange
        top = make_comment(PARENT, minutes=0)
        chain = [top]
        for minutes in range(1, 5001):
            chain.append(
                make_comment(PARENT, parent_comment_id=chain[-1].id, minutes=minutes)
            )

        # Act
        roots = build_comment_tree(reversed(chain))

        # Assert
        assert _ids(roots) == [top.id]
        assert _ids(roots[0].replies) == [c.id for c in chain[1:]]

    def test_chain_below_a_missing_comment_is_dropped(self):
        """Deleting a mid-thread reply hides everything chained beneath it."""
        # Arrange
        top = make_comment(PARENT, minutes=0)
        reply = make_comment(PARENT, parent_comment_id=top.id, minutes=1)
        nested = make_comment(PARENT, parent_comment_id=reply.id, minutes=2)
        deeper = make_comment(PARENT, parent_comment_id=nested.id, minutes=3)

        # Act
        roots = build_comment_tree([top, nested, deeper])

        # Assert
        assert _ids(roots) == [top.id]
        assert roots[0].replies == []
