"""Unit tests for row/model mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from discuss.domain.value import VoteKind
from discuss.persistence.mappers import row_to_comment, row_to_vote, vote_to_dict


class TestCommentMapper:
    """Tests for comment row mapping."""

    def test_row_to_comment_accepts_string_ids(self):
        now = datetime.now(timezone.utc)
        reply_id = uuid4()
        row = {
            "id": str(uuid4()),
            "solution_id": str(uuid4()),
            "author_id": str(uuid4()),
            "content": "Hello",
            "parent_id": None,
            "reply_ids": [str(reply_id)],
            "upvote_count": 2,
            "downvote_count": 1,
            "is_edited": False,
            "is_deleted": False,
            "created_at": now,
            "updated_at": now,
        }

        comment = row_to_comment(row)

        assert comment.parent_id is None
        assert comment.reply_ids == [reply_id]
        assert comment.total_votes == 1

    def test_null_reply_ids(self):
        now = datetime.now(timezone.utc)
        parent = uuid4()
        row = {
            "id": uuid4(),
            "solution_id": uuid4(),
            "author_id": uuid4(),
            "content": "Reply",
            "parent_id": parent,
            "reply_ids": None,
            "upvote_count": 0,
            "downvote_count": 0,
            "is_edited": True,
            "is_deleted": False,
            "created_at": now,
            "updated_at": now,
        }

        comment = row_to_comment(row)

        assert comment.parent_id == parent
        assert comment.reply_ids == []
        assert comment.is_reply


class TestVoteMapper:
    """Tests for vote row mapping."""

    def test_vote_type_column_maps_to_kind(self):
        row = {
            "comment_id": uuid4(),
            "user_id": uuid4(),
            "vote_type": "down",
            "cast_at": datetime.now(timezone.utc),
        }

        vote = row_to_vote(row)

        assert vote.kind == VoteKind.DOWN
        assert vote_to_dict(vote)["vote_type"] == "down"
