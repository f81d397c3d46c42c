"""Domain services."""

from .base import Service
from .comment_service import CommentService, page_offset
from .jwt_service import JWTService
from .solution_service import SolutionService
from .thread_composer import DecoratedComment, PagedThreads, ThreadComposer
from .user_service import UserService
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "CommentService",
    "DecoratedComment",
    "JWTService",
    "PagedThreads",
    "Service",
    "SolutionService",
    "ThreadComposer",
    "UserService",
    "VoteOutcome",
    "VoteService",
    "page_offset",
]
