"""Domain model entities for solution discussions."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.solution import Solution
from discuss.domain.model.user import User
from discuss.domain.model.vote import Vote, VoteDecision, resolve_vote

__all__ = [
    "Comment",
    "Solution",
    "User",
    "Vote",
    "VoteDecision",
    "resolve_vote",
]
