"""Comment use cases."""

from .common import AuthorItem, CommentItem, PaginationInfo
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_my_comments import (
    GetMyCommentsRequest,
    GetMyCommentsResponse,
    GetMyCommentsUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from .vote_comment import VoteCommentRequest, VoteCommentResponse, VoteCommentUseCase

__all__ = [
    "AuthorItem",
    "CommentItem",
    "PaginationInfo",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetMyCommentsRequest",
    "GetMyCommentsResponse",
    "GetMyCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
    "VoteCommentRequest",
    "VoteCommentResponse",
    "VoteCommentUseCase",
]
