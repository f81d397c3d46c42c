"""Delete comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId

from .common import parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    message: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        user_id = UserId(parse_uuid(request.user_id, "user"))

        await self.comment_service.soft_delete_comment(comment_id, user_id)

        return DeleteCommentResponse(
            success=True,
            message="Comment deleted successfully",
        )
