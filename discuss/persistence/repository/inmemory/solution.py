"""In-memory solution repository for testing."""

from typing import Optional

from discuss.domain.model.solution import Solution
from discuss.domain.repository.solution import SolutionRepository
from discuss.domain.value import SolutionId, UserId

from .store import InMemoryStore


class InMemorySolutionRepository(SolutionRepository):
    """In-memory implementation of SolutionRepository."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def exists(self, solution_id: SolutionId) -> bool:
        """Check whether a solution exists."""
        return solution_id in self._store.solutions

    async def find_owner_id(self, solution_id: SolutionId) -> Optional[UserId]:
        """Find the owner of a solution."""
        solution = self._store.solutions.get(solution_id)
        return solution.owner_id if solution else None

    async def save(self, solution: Solution) -> Solution:
        """Save a solution reference."""
        self._store.solutions[solution.id] = solution
        return solution
