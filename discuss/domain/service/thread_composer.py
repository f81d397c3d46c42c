"""Thread composer.

Read side that decorates comments with author display fields, the viewer's
vote, and (for top-level comments) their visible replies.
"""

import math
from dataclasses import dataclass, field
from typing import Sequence

import logfire

from discuss.domain.model.comment import Comment
from discuss.domain.value import AuthorProfile, CommentId, SolutionId, UserId, VoteKind

from .base import Service
from .comment_service import CommentService
from .user_service import UserService
from .vote_service import VoteService


@dataclass
class DecoratedComment:
    """A comment as presented to a particular viewer."""

    comment: Comment
    author: AuthorProfile | None
    user_vote: VoteKind | None
    replies: list["DecoratedComment"] = field(default_factory=list)


@dataclass
class PagedThreads:
    """One page of decorated comments."""

    items: list[DecoratedComment]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)


class ThreadComposer(Service):
    """Assembles comment threads for clients."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize thread composer.

        Args:
            comment_service: Comment domain service
            vote_service: Vote domain service (viewer votes)
            user_service: User domain service (author display fields)
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def compose_page(
        self,
        solution_id: SolutionId,
        page: int,
        page_size: int,
        viewer_id: UserId | None = None,
    ) -> PagedThreads:
        """Compose a page of a solution's top-level comments with their replies.

        Deleted replies are dropped from each `replies` list; they never affect
        the parent's visibility or the top-level total.
        """
        with logfire.span(
            "thread_composer.compose_page",
            solution_id=str(solution_id),
            page=page,
            page_size=page_size,
            authenticated=viewer_id is not None,
        ):
            comments, total = await self.comment_service.list_top_level(
                solution_id, page, page_size
            )
            items = await self.decorate(comments, viewer_id, with_replies=True)
            return PagedThreads(items=items, page=page, page_size=page_size, total=total)

    async def compose_single(
        self, comment_id: CommentId, viewer_id: UserId | None = None
    ) -> DecoratedComment:
        """Compose one visible comment with its replies.

        Raises:
            NotFoundError: If the comment doesn't exist or was deleted
        """
        with logfire.span(
            "thread_composer.compose_single",
            comment_id=str(comment_id),
            authenticated=viewer_id is not None,
        ):
            comment = await self.comment_service.get_visible_comment(comment_id)
            [decorated] = await self.decorate([comment], viewer_id, with_replies=True)
            return decorated

    async def decorate(
        self,
        comments: Sequence[Comment],
        viewer_id: UserId | None = None,
        with_replies: bool = False,
    ) -> list[DecoratedComment]:
        """Attach authors, viewer votes and optionally replies to comments.

        All lookups are batched across the whole set of comments and replies.
        """
        if not comments:
            return []

        replies_by_parent: dict[CommentId, list[Comment]] = {}
        if with_replies:
            replies = await self.comment_service.get_replies_for(comments)
            for reply in replies:
                if reply.parent_id is not None:
                    replies_by_parent.setdefault(reply.parent_id, []).append(reply)

        everything = [*comments, *(r for rs in replies_by_parent.values() for r in rs)]

        authors = await self.user_service.resolve_identities(
            [c.author_id for c in everything]
        )
        votes: dict[CommentId, VoteKind] = {}
        if viewer_id is not None:
            votes = await self.vote_service.get_user_votes_for_comments(
                viewer_id, [c.id for c in everything]
            )

        def build(comment: Comment) -> DecoratedComment:
            return DecoratedComment(
                comment=comment,
                author=authors.get(comment.author_id),
                user_vote=votes.get(comment.id),
                replies=[build(r) for r in replies_by_parent.get(comment.id, [])],
            )

        return [build(comment) for comment in comments]
