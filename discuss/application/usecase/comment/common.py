"""Response shapes and helpers shared by the comment use cases."""

import math
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.error import ValidationError
from discuss.domain.service import DecoratedComment
from discuss.domain.value import AuthorProfile, VoteKind


def parse_uuid(raw: str | None, label: str) -> UUID:
    """Parse a client-supplied identifier.

    Raises:
        ValidationError: If the value is missing or not a UUID
    """
    if not raw:
        raise ValidationError(f"Please provide a {label} ID")
    try:
        return UUID(raw)
    except (ValueError, TypeError):
        raise ValidationError(f"Please provide a valid {label} ID") from None


class AuthorItem(BaseModel):
    """Author display fields."""

    id: str
    display_name: str
    email: str | None

    @classmethod
    def from_profile(cls, profile: AuthorProfile) -> "AuthorItem":
        return cls(
            id=str(profile.id), display_name=profile.display_name, email=profile.email
        )


class CommentItem(BaseModel):
    """Comment as returned to clients."""

    comment_id: str
    solution_id: str
    author_id: str
    author: AuthorItem | None
    content: str
    parent_id: str | None
    reply_ids: list[str]
    upvote_count: int
    downvote_count: int
    total_votes: int
    vote_ratio: float
    is_edited: bool
    created_at: datetime
    updated_at: datetime
    user_vote: VoteKind | None = None
    replies: list["CommentItem"] = []

    @classmethod
    def from_decorated(cls, decorated: DecoratedComment) -> "CommentItem":
        comment = decorated.comment
        return cls(
            comment_id=str(comment.id),
            solution_id=str(comment.solution_id),
            author_id=str(comment.author_id),
            author=AuthorItem.from_profile(decorated.author) if decorated.author else None,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            reply_ids=[str(rid) for rid in comment.reply_ids],
            upvote_count=comment.upvote_count,
            downvote_count=comment.downvote_count,
            total_votes=comment.total_votes,
            vote_ratio=comment.vote_ratio,
            is_edited=comment.is_edited,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            user_vote=decorated.user_vote,
            replies=[cls.from_decorated(reply) for reply in decorated.replies],
        )


class PaginationInfo(BaseModel):
    """Pagination block of list responses."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationInfo":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit))
