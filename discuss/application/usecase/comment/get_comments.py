"""Get comments use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.config import CommentSettings
from discuss.domain.error import NotFoundError
from discuss.domain.service import SolutionService, ThreadComposer
from discuss.domain.value import SolutionId, UserId

from .common import CommentItem, PaginationInfo, parse_uuid


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    solution_id: str  # UUID string
    page: int = 1
    limit: int | None = None  # Defaults to the configured solution page size
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    solution_id: str
    data: list[CommentItem]
    pagination: PaginationInfo


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a solution's threads, newest first."""

    def __init__(
        self,
        thread_composer: ThreadComposer,
        solution_service: SolutionService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            thread_composer: Thread composer
            solution_service: Solution existence check
            comment_settings: Page size configuration
        """
        self.thread_composer = thread_composer
        self.solution_service = solution_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Returns one page of top-level comments, each with its visible replies
        and, for an authenticated viewer, the viewer's vote.

        Raises:
            NotFoundError: If the solution doesn't exist
        """
        solution_id = SolutionId(parse_uuid(request.solution_id, "solution"))
        viewer_id = UserId(parse_uuid(request.viewer_id, "user")) if request.viewer_id else None
        limit = min(
            request.limit or self.comment_settings.solution_page_size,
            self.comment_settings.max_page_size,
        )

        if not await self.solution_service.solution_exists(solution_id):
            raise NotFoundError("Solution", request.solution_id)

        threads = await self.thread_composer.compose_page(
            solution_id, request.page, limit, viewer_id=viewer_id
        )

        return GetCommentsResponse(
            solution_id=request.solution_id,
            data=[CommentItem.from_decorated(item) for item in threads.items],
            pagination=PaginationInfo.build(threads.page, threads.page_size, threads.total),
        )
