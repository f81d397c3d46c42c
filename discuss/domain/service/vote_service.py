"""Vote domain service.

Applies the vote toggle to a comment's ledger and counters as one unit,
under the comment's lock.
"""

from dataclasses import dataclass

import logfire

from discuss.domain.error import InvalidStateError, NotFoundError
from discuss.domain.model.comment import Comment
from discuss.domain.model.common import utcnow
from discuss.domain.model.vote import Vote, VoteDecision, resolve_vote
from discuss.domain.repository import CommentRepository, VoteRepository
from discuss.domain.value import CommentId, UserId, VoteKind

from .base import Service


@dataclass(frozen=True)
class VoteOutcome:
    """Result of casting a vote."""

    comment: Comment
    decision: VoteDecision

    @property
    def upvote_count(self) -> int:
        return self.comment.upvote_count

    @property
    def downvote_count(self) -> int:
        return self.comment.downvote_count

    @property
    def user_vote(self) -> VoteKind | None:
        return self.decision.kind


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote ledger repository
            comment_repository: Comment repository (counters and locking)
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    async def cast_vote(
        self, comment_id: CommentId, user_id: UserId, kind: VoteKind | str
    ) -> VoteOutcome:
        """Cast, switch or retract a user's vote on a comment.

        - No existing vote: the vote is added.
        - Same kind again: the vote is retracted.
        - Opposite kind: the vote is switched.

        Args:
            comment_id: Comment ID
            user_id: Voting user ID
            kind: "up" or "down"

        Returns:
            Updated comment and the applied transition

        Raises:
            ValidationError: If kind is not "up" or "down"
            NotFoundError: If the comment doesn't exist
            InvalidStateError: If the comment was deleted
        """
        vote_kind = VoteKind.parse(kind)

        with logfire.span(
            "vote_service.cast_vote",
            comment_id=str(comment_id),
            user_id=str(user_id),
            kind=vote_kind.value,
        ):
            async with self.comment_repository.lock(comment_id) as comment:
                if comment is None:
                    logfire.warn("Vote on non-existent comment", comment_id=str(comment_id))
                    raise NotFoundError("Comment", str(comment_id))
                if comment.is_deleted:
                    logfire.warn("Vote on deleted comment", comment_id=str(comment_id))
                    raise InvalidStateError("Cannot vote on deleted comment")

                existing = await self.vote_repository.find_by_user_and_comment(
                    user_id, comment_id
                )
                decision = resolve_vote(existing.kind if existing else None, vote_kind)
                now = utcnow()
                counted = comment.with_vote_counts(
                    comment.upvote_count + decision.upvote_delta,
                    comment.downvote_count + decision.downvote_delta,
                    now,
                )

                if decision.kind is None:
                    await self.vote_repository.delete(user_id, comment_id)
                else:
                    await self.vote_repository.save(
                        Vote(
                            comment_id=comment_id,
                            user_id=user_id,
                            kind=decision.kind,
                            cast_at=now,
                        )
                    )

                updated = await self.comment_repository.save(counted)

            logfire.info(
                "Vote applied",
                comment_id=str(comment_id),
                user_id=str(user_id),
                transition=decision.transition.value,
                upvotes=updated.upvote_count,
                downvotes=updated.downvote_count,
            )
            return VoteOutcome(comment=updated, decision=decision)

    async def get_user_vote(
        self, comment_id: CommentId, user_id: UserId
    ) -> VoteKind | None:
        """Get the user's current vote on a comment, if any."""
        vote = await self.vote_repository.find_by_user_and_comment(user_id, comment_id)
        return vote.kind if vote else None

    async def get_user_votes_for_comments(
        self, user_id: UserId, comment_ids: list[CommentId]
    ) -> dict[CommentId, VoteKind]:
        """Get the user's votes on several comments.

        Args:
            user_id: User ID
            comment_ids: Comment IDs to check

        Returns:
            Mapping of comment ID to vote kind, only for comments the user voted on
        """
        if not comment_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_comments(
            user_id, comment_ids
        )
        return {vote.comment_id: vote.kind for vote in votes}
