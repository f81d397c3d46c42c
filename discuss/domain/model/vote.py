"""Vote entity and the vote toggle.

Each user holds at most one vote per comment. Casting the same kind again
retracts it; casting the opposite kind switches it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import CommentId, UserId, VoteKind, VoteTransition


class Vote(DomainModel):
    """A user's current vote on a comment (ledger entry keyed by user)."""

    comment_id: CommentId
    user_id: UserId
    kind: VoteKind
    cast_at: datetime = Field(default_factory=utcnow)


@dataclass(frozen=True)
class VoteDecision:
    """Outcome of applying a requested vote to a user's existing vote."""

    transition: VoteTransition
    kind: Optional[VoteKind]  # Stored kind afterwards, None when retracted
    upvote_delta: int
    downvote_delta: int

    @property
    def is_net_new_upvote(self) -> bool:
        """True when this transition produced a fresh upvote."""
        return self.kind == VoteKind.UP and self.transition in (
            VoteTransition.ADDED,
            VoteTransition.SWITCHED,
        )


def _delta(kind: VoteKind, step: int) -> tuple[int, int]:
    return (step, 0) if kind == VoteKind.UP else (0, step)


def resolve_vote(existing: Optional[VoteKind], requested: VoteKind) -> VoteDecision:
    """Decide the ledger transition for a requested vote.

    Args:
        existing: The user's current vote kind on the comment, if any
        requested: The kind being cast

    Returns:
        The transition with the counter deltas to apply
    """
    if existing is None:
        up, down = _delta(requested, 1)
        return VoteDecision(VoteTransition.ADDED, requested, up, down)

    if existing == requested:
        up, down = _delta(requested, -1)
        return VoteDecision(VoteTransition.RETRACTED, None, up, down)

    old_up, old_down = _delta(existing, -1)
    new_up, new_down = _delta(requested, 1)
    return VoteDecision(
        VoteTransition.SWITCHED, requested, old_up + new_up, old_down + new_down
    )
