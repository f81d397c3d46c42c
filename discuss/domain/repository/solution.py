"""Solution repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model.solution import Solution
from discuss.domain.value import SolutionId, UserId


class SolutionRepository(ABC):
    """Read access to solutions owned by the analysis service."""

    @abstractmethod
    async def exists(self, solution_id: SolutionId) -> bool:
        """Check whether a solution exists."""
        pass

    @abstractmethod
    async def find_owner_id(self, solution_id: SolutionId) -> Optional[UserId]:
        """Find the owner of a solution."""
        pass

    @abstractmethod
    async def save(self, solution: Solution) -> Solution:
        """Save a solution reference."""
        pass
