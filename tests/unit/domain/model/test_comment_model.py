"""Unit tests for the Comment model."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from forum.domain.model import Comment
from forum.domain.value import CommentId, TargetRef, TargetType, UserId
from tests.conftest import BASE_TIME

STOCK = TargetRef(target_type=TargetType.STOCK, target_id=uuid4())


def _comment(**fields) -> Comment:
    data = {
        "id": CommentId(uuid4()),
        "parent": STOCK,
        "content": "Nice chart",
        "author_id": UserId(uuid4()),
        "author_name": "trader_joe",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    data.update(fields)
    return Comment(**data)


class TestCommentAttribution:
    """Tests for Comment validation."""

    def test_authored_comment_is_valid(self):
        comment = _comment()
        assert comment.is_anonymous is False

    def test_anonymous_comment_with_author_is_rejected(self):
        """A comment cannot be both anonymous and attributed."""
        with pytest.raises(ValidationError, match="cannot have an author"):
            _comment(is_anonymous=True)

    def test_comment_without_author_must_be_anonymous(self):
        with pytest.raises(ValidationError, match="require an author"):
            _comment(author_id=None)

    def test_comment_cannot_belong_to_a_comment(self):
        """Comments hang off content, never off another comment directly."""
        with pytest.raises(ValidationError, match="must belong to"):
            _comment(parent=TargetRef(target_type=TargetType.COMMENT, target_id=uuid4()))

    def test_reply_flag_must_match_parent_comment(self):
        with pytest.raises(ValidationError, match="is_reply"):
            _comment(is_reply=True)
