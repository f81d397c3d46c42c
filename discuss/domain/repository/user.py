"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from discuss.domain.model.user import User
from discuss.domain.value import UserId, UserStat


class UserRepository(ABC):
    """Repository for users as known to the discussion service."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID (batch query)."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def increment_stat(self, user_id: UserId, stat: UserStat) -> bool:
        """Atomically increment one of the user's counters by 1.

        Returns:
            True if the user exists and was updated
        """
        pass
