"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from discuss.domain.model.vote import Vote
from discuss.domain.value import CommentId, UserId


class VoteRepository(ABC):
    """Repository for the per-comment vote ledger.

    Entries are keyed by (comment_id, user_id). Writes must happen while the
    comment's lock is held so that counters and entries move together.
    """

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Vote]:
        """Find a user's votes on multiple comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comments to check

        Returns:
            Votes by the user on the specified comments
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert or replace the user's vote on the comment.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete the user's vote on the comment.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
