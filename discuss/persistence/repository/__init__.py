"""Repository implementations."""

from .comment import PostgresCommentRepository
from .solution import PostgresSolutionRepository
from .user import PostgresUserRepository
from .vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresSolutionRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
