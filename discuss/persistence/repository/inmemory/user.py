"""In-memory user repository for testing."""

from typing import Optional, Sequence

from discuss.domain.model.user import User
from discuss.domain.repository.user import UserRepository
from discuss.domain.value import UserId, UserStat

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        found = (self._store.users.get(uid) for uid in dict.fromkeys(user_ids))
        return [user for user in found if user is not None]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._store.users[user.id] = user
        return user

    async def increment_stat(self, user_id: UserId, stat: UserStat) -> bool:
        """Increment one of the user's counters by 1."""
        user = self._store.users.get(user_id)
        if user is None:
            return False
        self._store.users[user_id] = user.model_copy(
            update={stat.value: getattr(user, stat.value) + 1}
        )
        return True
