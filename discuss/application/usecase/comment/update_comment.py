"""Update comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import (
    CommentService,
    DecoratedComment,
    UserService,
    VoteService,
)
from discuss.domain.value import CommentId, UserId

from .common import CommentItem, parse_uuid


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str | None  # New content (required, cannot be blank)


class UpdateCommentResponse(CommentItem):
    """Update comment response."""


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service (author display fields)
            vote_service: Vote domain service (the editor's own vote)
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Display fields are resolved before the edit so that a failed lookup
        never follows a stored change.

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
            InvalidStateError: If the comment was deleted
            UnavailableError: If the author's identity can't be resolved
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        user_id = UserId(parse_uuid(request.user_id, "user"))

        # Only the author may edit, so the caller's profile is the author's
        author = await self.user_service.resolve_identity(user_id)
        user_vote = await self.vote_service.get_user_vote(comment_id, user_id)

        updated = await self.comment_service.edit_comment(
            comment_id, user_id, request.content
        )

        item = CommentItem.from_decorated(
            DecoratedComment(comment=updated, author=author, user_vote=user_vote)
        )
        return UpdateCommentResponse.model_validate(item.model_dump())
