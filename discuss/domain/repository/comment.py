"""Comment repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional, Sequence

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, SolutionId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, deleted or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments by ID (batch query).

        Args:
            comment_ids: Identifiers to fetch

        Returns:
            Non-deleted comments found, in the order of `comment_ids`
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        solution_id: SolutionId,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find non-deleted top-level comments of a solution, newest first.

        Args:
            solution_id: The solution ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of top-level comments
        """
        pass

    @abstractmethod
    async def count_top_level(self, solution_id: SolutionId) -> int:
        """Count non-deleted top-level comments of a solution."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find non-deleted comments by an author across solutions, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of the author's comments
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count non-deleted comments by an author."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Callers updating an existing comment must hold its lock.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    def lock(
        self, comment_id: CommentId
    ) -> AbstractAsyncContextManager[Optional[Comment]]:
        """Serialize mutations of one comment.

        While the context is held no other caller can mutate the same comment
        (its fields, reply list, or vote ledger). Other comments are unaffected.

        Args:
            comment_id: The comment to lock

        Returns:
            Async context manager yielding the current comment, or None if missing
        """
        pass
