"""Domain value objects for solution discussions."""

from discuss.domain.value.identifiers import CommentId, SolutionId, UserId
from discuss.domain.value.types import (
    MAX_COMMENT_LENGTH,
    AuthorProfile,
    CommentContent,
    UserStat,
    VoteKind,
    VoteTransition,
)

__all__ = [
    # Identifiers
    "UserId",
    "SolutionId",
    "CommentId",
    # Types
    "MAX_COMMENT_LENGTH",
    "AuthorProfile",
    "CommentContent",
    "UserStat",
    "VoteKind",
    "VoteTransition",
]
