"""Get my comments use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.config import CommentSettings
from discuss.domain.service import CommentService, ThreadComposer
from discuss.domain.value import UserId

from .common import CommentItem, PaginationInfo, parse_uuid


class GetMyCommentsRequest(BaseModel):
    """Get my comments request."""

    user_id: str  # Current user ID
    page: int = 1
    limit: int | None = None  # Defaults to the configured author page size


class GetMyCommentsResponse(BaseModel):
    """Get my comments response."""

    data: list[CommentItem]
    pagination: PaginationInfo


class GetMyCommentsUseCase(BaseUseCase):
    """Use case for listing the caller's own comments across solutions."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_composer: ThreadComposer,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get my comments use case.

        Args:
            comment_service: Comment domain service
            thread_composer: Thread composer for the response shape
            comment_settings: Page size configuration
        """
        self.comment_service = comment_service
        self.thread_composer = thread_composer
        self.comment_settings = comment_settings

    async def execute(self, request: GetMyCommentsRequest) -> GetMyCommentsResponse:
        """Execute get my comments flow."""
        user_id = UserId(parse_uuid(request.user_id, "user"))
        limit = min(
            request.limit or self.comment_settings.author_page_size,
            self.comment_settings.max_page_size,
        )

        comments, total = await self.comment_service.list_by_author(
            user_id, request.page, limit
        )
        decorated = await self.thread_composer.decorate(comments, viewer_id=user_id)

        return GetMyCommentsResponse(
            data=[CommentItem.from_decorated(item) for item in decorated],
            pagination=PaginationInfo.build(request.page, limit, total),
        )
