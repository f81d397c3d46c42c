"""PostgreSQL implementation of Comment repository."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import List, Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, SolutionId, UserId
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Per-comment serialization uses row locks (SELECT ... FOR UPDATE) held
    until the request transaction commits or rolls back.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _newest_first(self, stmt):
        return stmt.order_by(
            desc(comments_table.c.created_at), desc(comments_table.c.id)
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments by ID, keeping the requested order."""
        if not comment_ids:
            return []

        stmt = select(comments_table).where(
            comments_table.c.id.in_(comment_ids),
            comments_table.c.is_deleted.is_(False),
        )

        result = await self.session.execute(stmt)
        by_id = {
            comment.id: comment
            for comment in (row_to_comment(row._asdict()) for row in result.fetchall())
        }
        return [by_id[cid] for cid in comment_ids if cid in by_id]

    async def find_top_level(
        self,
        solution_id: SolutionId,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find visible top-level comments of a solution, newest first."""
        stmt = select(comments_table).where(
            comments_table.c.solution_id == solution_id,
            comments_table.c.parent_id.is_(None),
            comments_table.c.is_deleted.is_(False),
        )
        stmt = self._newest_first(stmt).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, solution_id: SolutionId) -> int:
        """Count visible top-level comments of a solution."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.solution_id == solution_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find an author's visible comments, newest first."""
        stmt = select(comments_table).where(
            comments_table.c.author_id == author_id,
            comments_table.c.is_deleted.is_(False),
        )
        stmt = self._newest_first(stmt).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count an author's visible comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.author_id == author_id)
            .where(comments_table.c.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        stmt = insert(comments_table).values(**comment_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={k: v for k, v in comment_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    @asynccontextmanager
    async def lock(self, comment_id: CommentId) -> AsyncIterator[Optional[Comment]]:
        """Row-lock the comment and yield its current state."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        yield row_to_comment(row._asdict()) if row else None
