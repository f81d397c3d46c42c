"""Solution lookup service."""

import logfire

from discuss.domain.error import UnavailableError
from discuss.domain.repository import SolutionRepository
from discuss.domain.value import SolutionId, UserId

from .base import Service


class SolutionService(Service):
    """Narrow view of the solution catalogue used by comments."""

    def __init__(self, solution_repository: SolutionRepository) -> None:
        """Initialize solution service.

        Args:
            solution_repository: Solution repository
        """
        self.solution_repository = solution_repository

    async def solution_exists(self, solution_id: SolutionId) -> bool:
        """Check whether a solution exists.

        Raises:
            UnavailableError: If the lookup itself failed
        """
        with logfire.span(
            "solution_service.solution_exists", solution_id=str(solution_id)
        ):
            try:
                exists = await self.solution_repository.exists(solution_id)
            except Exception as e:
                logfire.error(
                    "Solution lookup failed", solution_id=str(solution_id), error=str(e)
                )
                raise UnavailableError("Solution lookup", str(e)) from e

            if not exists:
                logfire.warn("Solution not found", solution_id=str(solution_id))
            return exists

    async def get_owner_id(self, solution_id: SolutionId) -> UserId | None:
        """Get the owner of a solution, if it exists."""
        return await self.solution_repository.find_owner_id(solution_id)
