"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import User
from discuss.domain.repository import UserRepository
from discuss.domain.value import UserId, UserStat
from discuss.persistence.mappers import row_to_user, user_to_dict
from discuss.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID (batch query)."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        stmt = insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "display_name": user_dict["display_name"],
                "email": user_dict["email"],
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def increment_stat(self, user_id: UserId, stat: UserStat) -> bool:
        """Atomically increment a counter by 1.

        Runs in a SAVEPOINT so a failure here leaves the surrounding
        transaction usable.
        """
        column = users_table.c[stat.value]
        async with self.session.begin_nested():
            stmt = (
                update(users_table)
                .where(users_table.c.id == user_id)
                .values({column: column + 1})
            )
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
