"""Process-local backing store for the in-memory repositories.

A store is an explicit object: construct one per process (or per test) and
hand it to every repository that should share state.
"""

import itertools

from discuss.domain.model import Comment, Solution, User, Vote
from discuss.domain.value import CommentId, SolutionId, UserId
from discuss.util.locks import KeyedLock


class InMemoryStore:
    """Shared state for comments, the vote ledger, users and solutions."""

    def __init__(self) -> None:
        self.comments: dict[CommentId, Comment] = {}
        self.votes: dict[tuple[CommentId, UserId], Vote] = {}
        self.users: dict[UserId, User] = {}
        self.solutions: dict[SolutionId, Solution] = {}
        self.comment_locks: KeyedLock[CommentId] = KeyedLock()

        # Insertion sequence, tie-breaker for equal created_at values
        self._sequence = itertools.count()
        self.comment_sequence: dict[CommentId, int] = {}

    def next_sequence(self) -> int:
        return next(self._sequence)
