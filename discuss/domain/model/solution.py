"""Solution reference.

Solutions and their code-analysis pipeline live in another service. Comments
only need to know that a solution exists and who owns it.
"""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import SolutionId, UserId


class Solution(DomainModel):
    """Minimal solution record."""

    id: SolutionId
    owner_id: UserId
    title: str = ""
    created_at: datetime = Field(default_factory=utcnow)
