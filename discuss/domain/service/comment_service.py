"""Comment domain service.

Owns comment creation, editing, soft deletion and listing. Threading is
capped at one level: a reply can never be the parent of another comment.
"""

from typing import Sequence
from uuid import uuid4

import logfire

from discuss.domain.error import (
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.model.comment import Comment
from discuss.domain.model.common import utcnow
from discuss.domain.repository import CommentRepository
from discuss.domain.value import (
    MAX_COMMENT_LENGTH,
    CommentContent,
    CommentId,
    SolutionId,
    UserId,
)

from .base import Service
from .solution_service import SolutionService


def page_offset(page: int, page_size: int) -> int:
    """Offset of the first item of a 1-based page.

    Raises:
        ValidationError: If page or page_size is below 1
    """
    if page < 1:
        raise ValidationError("Page must be at least 1")
    if page_size < 1:
        raise ValidationError("Page size must be at least 1")
    return (page - 1) * page_size


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        solution_service: SolutionService,
        max_length: int = MAX_COMMENT_LENGTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            solution_service: Solution existence check
            max_length: Maximum content length after trimming
        """
        self.comment_repository = comment_repository
        self.solution_service = solution_service
        self.max_length = max_length

    async def create_comment(
        self,
        solution_id: SolutionId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a solution or reply to a top-level comment.

        Args:
            solution_id: Solution ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is invalid, the parent is itself a
                reply, or the parent belongs to another solution
            NotFoundError: If the solution or the parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            solution_id=str(solution_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = CommentContent.parse(content, self.max_length)

            # Collaborator check happens before any per-comment lock is taken
            if not await self.solution_service.solution_exists(solution_id):
                raise NotFoundError("Solution", str(solution_id))

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                solution_id=solution_id,
                author_id=author_id,
                content=text,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            if parent_id is None:
                saved = await self.comment_repository.save(comment)
            else:
                async with self.comment_repository.lock(parent_id) as parent:
                    if parent is None or parent.is_deleted:
                        logfire.warn(
                            "Parent comment not found",
                            parent_id=str(parent_id),
                            solution_id=str(solution_id),
                        )
                        raise NotFoundError("Parent comment", str(parent_id))
                    if parent.is_reply:
                        logfire.warn(
                            "Reply to a reply rejected",
                            parent_id=str(parent_id),
                            grandparent_id=str(parent.parent_id),
                        )
                        raise ValidationError("Cannot reply to a reply")
                    if parent.solution_id != solution_id:
                        logfire.warn(
                            "Parent comment does not belong to solution",
                            parent_id=str(parent_id),
                            parent_solution_id=str(parent.solution_id),
                            target_solution_id=str(solution_id),
                        )
                        raise ValidationError(
                            "Parent comment does not belong to this solution"
                        )

                    saved = await self.comment_repository.save(comment)
                    await self.comment_repository.save(parent.with_reply(saved.id))

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                solution_id=str(solution_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, including soft-deleted ones.

        For internal bookkeeping only, client reads use get_visible_comment.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def get_visible_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID, treating soft-deleted comments as absent.

        Raises:
            NotFoundError: If the comment doesn't exist or was deleted
        """
        comment = await self.get_comment(comment_id)
        if comment.is_deleted:
            logfire.info("Deleted comment requested", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_replies_for(self, parents: Sequence[Comment]) -> list[Comment]:
        """Get the non-deleted replies of several comments (batch query).

        Replies come back grouped by parent, each group in creation order.
        """
        reply_ids = [rid for parent in parents for rid in parent.reply_ids]
        if not reply_ids:
            return []
        return await self.comment_repository.find_by_ids(reply_ids)

    async def edit_comment(
        self, comment_id: CommentId, caller_id: UserId, content: str
    ) -> Comment:
        """Replace a comment's content.

        Args:
            comment_id: Comment ID
            caller_id: User requesting the edit (must be the author)
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller is not the author
            InvalidStateError: If the comment was deleted
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            caller_id=str(caller_id),
        ):
            text = CommentContent.parse(content, self.max_length)

            async with self.comment_repository.lock(comment_id) as comment:
                if comment is None:
                    raise NotFoundError("Comment", str(comment_id))
                if comment.author_id != caller_id:
                    raise NotAuthorizedError("comment", str(comment_id), str(caller_id))
                if comment.is_deleted:
                    raise InvalidStateError("Cannot update deleted comment")

                updated = await self.comment_repository.save(
                    comment.with_content(text, utcnow())
                )

            logfire.info(
                "Comment edited", comment_id=str(comment_id), content_length=len(text)
            )
            return updated

    async def soft_delete_comment(
        self, comment_id: CommentId, caller_id: UserId
    ) -> Comment:
        """Mark a comment as deleted.

        Replies are left untouched. Deleting an already deleted comment is a
        no-op that still succeeds.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        with logfire.span(
            "comment_service.soft_delete_comment",
            comment_id=str(comment_id),
            caller_id=str(caller_id),
        ):
            async with self.comment_repository.lock(comment_id) as comment:
                if comment is None:
                    raise NotFoundError("Comment", str(comment_id))
                if comment.author_id != caller_id:
                    raise NotAuthorizedError("comment", str(comment_id), str(caller_id))
                if comment.is_deleted:
                    logfire.info("Comment already deleted", comment_id=str(comment_id))
                    return comment

                deleted = await self.comment_repository.save(
                    comment.soft_deleted(utcnow())
                )

            logfire.info("Comment deleted", comment_id=str(comment_id))
            return deleted

    async def list_top_level(
        self, solution_id: SolutionId, page: int, page_size: int
    ) -> tuple[list[Comment], int]:
        """List a solution's visible top-level comments, newest first.

        Returns:
            The requested page and the total number of visible top-level comments
        """
        offset = page_offset(page, page_size)
        with logfire.span(
            "comment_service.list_top_level",
            solution_id=str(solution_id),
            page=page,
            page_size=page_size,
        ):
            total = await self.comment_repository.count_top_level(solution_id)
            comments = await self.comment_repository.find_top_level(
                solution_id, limit=page_size, offset=offset
            )
            logfire.info(
                "Top-level comments retrieved",
                solution_id=str(solution_id),
                count=len(comments),
                total=total,
            )
            return comments, total

    async def list_by_author(
        self, author_id: UserId, page: int, page_size: int
    ) -> tuple[list[Comment], int]:
        """List an author's visible comments across solutions, newest first."""
        offset = page_offset(page, page_size)
        with logfire.span(
            "comment_service.list_by_author",
            author_id=str(author_id),
            page=page,
            page_size=page_size,
        ):
            total = await self.comment_repository.count_by_author(author_id)
            comments = await self.comment_repository.find_by_author(
                author_id, limit=page_size, offset=offset
            )
            return comments, total
