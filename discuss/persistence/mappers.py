"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from discuss.domain.model import Comment, Solution, User, Vote
from discuss.domain.value import CommentId, SolutionId, UserId, VoteKind


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        solution_id=SolutionId(_uuid(row["solution_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        reply_ids=[CommentId(_uuid(rid)) for rid in row.get("reply_ids") or []],
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        is_edited=row["is_edited"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        kind=VoteKind(row["vote_type"]),
        cast_at=row["cast_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "comment_id": vote.comment_id,
        "user_id": vote.user_id,
        "vote_type": vote.kind.value,
        "cast_at": vote.cast_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        display_name=row["display_name"],
        email=row.get("email"),
        comments_posted=row["comments_posted"],
        upvotes_received=row["upvotes_received"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_solution(row: Dict[str, Any]) -> Solution:
    """Convert database row to Solution domain model."""
    return Solution(
        id=SolutionId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        title=row["title"],
        created_at=row["created_at"],
    )


def solution_to_dict(solution: Solution) -> Dict[str, Any]:
    """Convert Solution domain model to database dict."""
    return solution.model_dump()
