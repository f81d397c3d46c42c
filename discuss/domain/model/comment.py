"""Comment entity.

Comments are threaded one level deep: a top-level comment may collect
replies, a reply may not be replied to. Deletion is always soft.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel, utcnow
from discuss.domain.value import CommentId, SolutionId, UserId
from discuss.domain.value.types import MAX_COMMENT_LENGTH


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - reply_ids: Child ids in creation order (top-level comments only)

    Vote counters are denormalized from the comment's vote ledger and are
    only ever written together with it.
    """

    id: CommentId
    solution_id: SolutionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    parent_id: Optional[CommentId] = None
    reply_ids: list[CommentId] = Field(default_factory=list)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    is_edited: bool = False
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def total_votes(self) -> int:
        """Net score (upvotes minus downvotes)."""
        return self.upvote_count - self.downvote_count

    @property
    def vote_ratio(self) -> float:
        """Share of upvotes among all votes, as a percentage with one decimal."""
        total = self.upvote_count + self.downvote_count
        if total == 0:
            return 0.0
        return round(self.upvote_count / total * 100, 1)

    def with_content(self, content: str, at: datetime) -> "Comment":
        return self.model_copy(
            update={"content": content, "is_edited": True, "updated_at": at}
        )

    def with_reply(self, reply_id: CommentId) -> "Comment":
        return self.model_copy(update={"reply_ids": [*self.reply_ids, reply_id]})

    def with_vote_counts(self, upvotes: int, downvotes: int, at: datetime) -> "Comment":
        # Validated, counters never go below zero
        return type(self).model_validate(
            {
                **self.model_dump(),
                "upvote_count": upvotes,
                "downvote_count": downvotes,
                "updated_at": at,
            }
        )

    def soft_deleted(self, at: datetime) -> "Comment":
        return self.model_copy(update={"is_deleted": True, "updated_at": at})
