"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Vote
from discuss.domain.repository import VoteRepository
from discuss.domain.value import CommentId, UserId
from discuss.persistence.mappers import row_to_vote, vote_to_dict
from discuss.persistence.tables import comment_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Vote]:
        """Find a user's votes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment."""
        stmt = select(comment_votes_table).where(
            comment_votes_table.c.comment_id == comment_id
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert or replace the user's vote."""
        vote_dict = vote_to_dict(vote)
        stmt = insert(comment_votes_table).values(**vote_dict)
        stmt = stmt.on_conflict_do_update(
            constraint="pk_comment_votes",
            set_={"vote_type": vote_dict["vote_type"], "cast_at": vote_dict["cast_at"]},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete the user's vote on the comment."""
        stmt = delete(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
