"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from discuss.domain.model.vote import Vote
from discuss.domain.repository.vote import VoteRepository
from discuss.domain.value import CommentId, UserId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository.

    Ledger entries are keyed by (comment_id, user_id), so a user never holds
    more than one vote per comment.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        return self._store.votes.get((comment_id, user_id))

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Vote]:
        """Find a user's votes on multiple comments (batch query)."""
        found = (self._store.votes.get((cid, user_id)) for cid in set(comment_ids))
        return [vote for vote in found if vote is not None]

    async def find_by_comment(self, comment_id: CommentId) -> list[Vote]:
        """Find all votes on a comment."""
        return [v for (cid, _), v in self._store.votes.items() if cid == comment_id]

    async def save(self, vote: Vote) -> Vote:
        """Insert or replace the user's vote."""
        self._store.votes[(vote.comment_id, vote.user_id)] = vote
        return vote

    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete the user's vote on the comment."""
        return self._store.votes.pop((comment_id, user_id), None) is not None
