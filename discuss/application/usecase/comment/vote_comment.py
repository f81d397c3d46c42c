"""Vote on comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import (
    CommentService,
    DecoratedComment,
    UserService,
    VoteService,
)
from discuss.domain.value import CommentId, UserId, VoteKind, VoteTransition

from .common import CommentItem, parse_uuid


class VoteCommentRequest(BaseModel):
    """Vote request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: str | None  # "up" or "down", validated by the vote service


class VoteCommentResponse(CommentItem):
    """Comment with updated counts and the applied transition."""

    transition: VoteTransition


class VoteCommentUseCase(BaseUseCase):
    """Use case for casting, switching or retracting a vote on a comment."""

    def __init__(
        self,
        vote_service: VoteService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize vote comment use case.

        Args:
            vote_service: Vote domain service
            comment_service: Comment domain service (author lookup)
            user_service: User domain service (identities and stats)
        """
        self.vote_service = vote_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        The author's display fields are resolved before the vote is applied,
        so an identity outage fails the request without touching the ledger.
        The comment author's "upvotes received" counter is bumped only when
        the vote produced a fresh upvote (added or switched to up).

        Raises:
            ValidationError: If vote type is invalid
            NotFoundError: If the comment doesn't exist
            InvalidStateError: If the comment was deleted
            UnavailableError: If the author's identity can't be resolved
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        user_id = UserId(parse_uuid(request.user_id, "user"))
        kind = VoteKind.parse(request.vote_type)

        target = await self.comment_service.get_comment(comment_id)
        author = await self.user_service.resolve_identity(target.author_id)

        outcome = await self.vote_service.cast_vote(comment_id, user_id, kind)

        if outcome.decision.is_net_new_upvote:
            await self.user_service.record_upvote_received(outcome.comment.author_id)

        item = CommentItem.from_decorated(
            DecoratedComment(
                comment=outcome.comment, author=author, user_vote=outcome.user_vote
            )
        )
        return VoteCommentResponse(
            **item.model_dump(), transition=outcome.decision.transition
        )
