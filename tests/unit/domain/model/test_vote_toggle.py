"""Unit tests for the vote toggle and comment vote properties."""

from uuid import uuid4

import pytest

from discuss.domain.model import Comment, resolve_vote
from discuss.domain.value import (
    CommentId,
    SolutionId,
    UserId,
    VoteKind,
    VoteTransition,
)


class TestResolveVote:
    """Tests for resolve_vote."""

    @pytest.mark.parametrize(
        "existing, requested, transition, stored, deltas",
        [
            (None, VoteKind.UP, VoteTransition.ADDED, VoteKind.UP, (1, 0)),
            (None, VoteKind.DOWN, VoteTransition.ADDED, VoteKind.DOWN, (0, 1)),
            (VoteKind.UP, VoteKind.UP, VoteTransition.RETRACTED, None, (-1, 0)),
            (VoteKind.DOWN, VoteKind.DOWN, VoteTransition.RETRACTED, None, (0, -1)),
            (VoteKind.UP, VoteKind.DOWN, VoteTransition.SWITCHED, VoteKind.DOWN, (-1, 1)),
            (VoteKind.DOWN, VoteKind.UP, VoteTransition.SWITCHED, VoteKind.UP, (1, -1)),
        ],
    )
    def test_transition_table(self, existing, requested, transition, stored, deltas):
        """Each (existing, requested) pair maps to one transition and delta."""
        decision = resolve_vote(existing, requested)

        assert decision.transition == transition
        assert decision.kind == stored
        assert (decision.upvote_delta, decision.downvote_delta) == deltas

    def test_net_new_upvote_only_for_added_or_switched_up(self):
        """Only a fresh upvote counts towards the author's received upvotes."""
        assert resolve_vote(None, VoteKind.UP).is_net_new_upvote
        assert resolve_vote(VoteKind.DOWN, VoteKind.UP).is_net_new_upvote

        assert not resolve_vote(VoteKind.UP, VoteKind.UP).is_net_new_upvote
        assert not resolve_vote(None, VoteKind.DOWN).is_net_new_upvote
        assert not resolve_vote(VoteKind.UP, VoteKind.DOWN).is_net_new_upvote
        assert not resolve_vote(VoteKind.DOWN, VoteKind.DOWN).is_net_new_upvote


class TestVoteKind:
    """Tests for VoteKind parsing."""

    def test_parse_accepts_up_and_down(self):
        assert VoteKind.parse("up") == VoteKind.UP
        assert VoteKind.parse("down") == VoteKind.DOWN
        assert VoteKind.parse(VoteKind.UP) == VoteKind.UP

    @pytest.mark.parametrize("raw", ["UP", "sideways", "", None])
    def test_parse_rejects_anything_else(self, raw):
        from discuss.domain.error import ValidationError

        with pytest.raises(ValidationError, match="valid vote type"):
            VoteKind.parse(raw)


def _comment(up: int = 0, down: int = 0) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        solution_id=SolutionId(uuid4()),
        author_id=UserId(uuid4()),
        content="Nice approach",
        upvote_count=up,
        downvote_count=down,
    )


class TestCommentVoteProperties:
    """Tests for derived vote fields."""

    def test_no_votes(self):
        comment = _comment()
        assert comment.total_votes == 0
        assert comment.vote_ratio == 0.0

    def test_total_is_net_score(self):
        comment = _comment(up=3, down=5)
        assert comment.total_votes == -2

    def test_ratio_is_upvote_percentage_with_one_decimal(self):
        assert _comment(up=2, down=1).vote_ratio == 66.7
        assert _comment(up=1, down=0).vote_ratio == 100.0

    def test_counts_cannot_go_negative(self):
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            _comment(up=-1)

    def test_vote_count_update_is_validated(self):
        from pydantic import ValidationError as PydanticValidationError

        comment = _comment(up=1)

        assert comment.with_vote_counts(0, 1, comment.updated_at).downvote_count == 1
        with pytest.raises(PydanticValidationError):
            comment.with_vote_counts(1, -1, comment.updated_at)
