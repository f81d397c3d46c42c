"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .solution import InMemorySolutionRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemorySolutionRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
