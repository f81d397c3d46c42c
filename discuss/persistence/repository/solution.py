"""PostgreSQL implementation of Solution repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Solution
from discuss.domain.repository import SolutionRepository
from discuss.domain.value import SolutionId, UserId
from discuss.persistence.mappers import solution_to_dict
from discuss.persistence.tables import solutions_table


class PostgresSolutionRepository(SolutionRepository):
    """PostgreSQL implementation of SolutionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, solution_id: SolutionId) -> bool:
        """Check whether a solution exists."""
        stmt = select(solutions_table.c.id).where(solutions_table.c.id == solution_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_owner_id(self, solution_id: SolutionId) -> Optional[UserId]:
        """Find the owner of a solution."""
        stmt = select(solutions_table.c.owner_id).where(
            solutions_table.c.id == solution_id
        )
        result = await self.session.execute(stmt)
        owner_id = result.scalar()
        return UserId(owner_id) if owner_id else None

    async def save(self, solution: Solution) -> Solution:
        """Save a solution reference."""
        solution_dict = solution_to_dict(solution)
        stmt = insert(solutions_table).values(**solution_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[solutions_table.c.id],
            set_={"title": solution_dict["title"]},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return solution
