"""Get single comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import ThreadComposer
from discuss.domain.value import CommentId, UserId

from .common import CommentItem, parse_uuid


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetCommentUseCase(BaseUseCase):
    """Use case for the direct-link view of one comment and its replies."""

    def __init__(self, thread_composer: ThreadComposer) -> None:
        """Initialize get comment use case.

        Args:
            thread_composer: Thread composer
        """
        self.thread_composer = thread_composer

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or was deleted
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        viewer_id = UserId(parse_uuid(request.viewer_id, "user")) if request.viewer_id else None

        decorated = await self.thread_composer.compose_single(comment_id, viewer_id)
        return CommentItem.from_decorated(decorated)
