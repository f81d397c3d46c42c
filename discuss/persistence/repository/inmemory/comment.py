"""In-memory comment repository for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Iterable, Optional, Sequence

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, SolutionId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _newest_first(self, comments: Iterable[Comment]) -> list[Comment]:
        return sorted(
            comments,
            key=lambda c: (c.created_at, self._store.comment_sequence.get(c.id, 0)),
            reverse=True,
        )

    def _visible_top_level(self, solution_id: SolutionId) -> list[Comment]:
        return [
            c
            for c in self._store.comments.values()
            if c.solution_id == solution_id and c.parent_id is None and not c.is_deleted
        ]

    def _visible_by_author(self, author_id: UserId) -> list[Comment]:
        return [
            c
            for c in self._store.comments.values()
            if c.author_id == author_id and not c.is_deleted
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments by ID, keeping the requested order."""
        found = (self._store.comments.get(cid) for cid in comment_ids)
        return [c for c in found if c is not None and not c.is_deleted]

    async def find_top_level(
        self,
        solution_id: SolutionId,
        limit: int,
        offset: int = 0,
    ) -> list[Comment]:
        """Find visible top-level comments of a solution, newest first."""
        comments = self._newest_first(self._visible_top_level(solution_id))
        return comments[offset : offset + limit]

    async def count_top_level(self, solution_id: SolutionId) -> int:
        """Count visible top-level comments of a solution."""
        return len(self._visible_top_level(solution_id))

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int = 0,
    ) -> list[Comment]:
        """Find an author's visible comments, newest first."""
        comments = self._newest_first(self._visible_by_author(author_id))
        return comments[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count an author's visible comments."""
        return len(self._visible_by_author(author_id))

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        if comment.id not in self._store.comment_sequence:
            self._store.comment_sequence[comment.id] = self._store.next_sequence()
        self._store.comments[comment.id] = comment
        return comment

    @asynccontextmanager
    async def lock(self, comment_id: CommentId) -> AsyncIterator[Optional[Comment]]:
        """Hold the comment's lock and yield its current state."""
        async with self._store.comment_locks.hold(comment_id):
            yield self._store.comments.get(comment_id)
