"""Create comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import CommentService, DecoratedComment, UserService
from discuss.domain.value import CommentId, SolutionId, UserId

from .common import CommentItem, parse_uuid


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    solution_id: str | None  # UUID string
    content: str | None
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a solution or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service (identities and stats)
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate identifiers
        2. Resolve the author's display fields
        3. Create comment via comment service (validates solution and parent)
        4. Bump the author's "comments posted" counter (best effort)

        Nothing is read after the comment is stored: a new comment has no
        replies and no votes yet.

        Raises:
            ValidationError: If input is malformed or the parent is a reply
            NotFoundError: If the solution or parent comment doesn't exist
            UnavailableError: If the author's identity can't be resolved
        """
        solution_id = SolutionId(parse_uuid(request.solution_id, "solution"))
        author_id = UserId(parse_uuid(request.author_id, "user"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent comment"))
            if request.parent_id
            else None
        )

        author = await self.user_service.resolve_identity(author_id)

        comment = await self.comment_service.create_comment(
            solution_id=solution_id,
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )

        await self.user_service.record_comment_posted(author_id)

        item = CommentItem.from_decorated(
            DecoratedComment(comment=comment, author=author, user_vote=None)
        )
        return CreateCommentResponse.model_validate(item.model_dump())
