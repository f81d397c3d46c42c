"""Domain value objects for solution discussions.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from discuss.domain.error import ValidationError
from discuss.domain.value.common import RootValueObject, ValueObject
from discuss.domain.value.identifiers import UserId

MAX_COMMENT_LENGTH = 2000


class VoteKind(str, Enum):
    """Direction of a vote on a comment."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, raw: "str | VoteKind | None") -> "VoteKind":
        """Parse a client-supplied vote kind.

        Raises:
            ValidationError: If the value is not "up" or "down"
        """
        if isinstance(raw, VoteKind):
            return raw
        try:
            return cls(raw)
        except ValueError:
            raise ValidationError(
                'Please provide valid vote type ("up" or "down")'
            ) from None


class VoteTransition(str, Enum):
    """Which branch of the vote toggle applied."""

    ADDED = "added"
    RETRACTED = "retracted"
    SWITCHED = "switched"


class UserStat(str, Enum):
    """Per-user counters maintained by the identity service."""

    COMMENTS_POSTED = "comments_posted"
    UPVOTES_RECEIVED = "upvotes_received"


class CommentContent(RootValueObject[str]):
    """Comment body, trimmed, 1-2000 characters."""

    @classmethod
    def parse(cls, raw: str | None, max_length: int = MAX_COMMENT_LENGTH) -> str:
        """Return trimmed content or raise a domain ValidationError.

        Args:
            raw: Client-supplied content
            max_length: Upper bound after trimming (never above 2000)

        Returns:
            Trimmed content string

        Raises:
            ValidationError: If content is missing, blank, or too long
        """
        if raw is None:
            raise ValidationError("Please provide content")
        text = raw.strip()
        limit = min(max_length, MAX_COMMENT_LENGTH)
        if not text or len(text) > limit:
            raise ValidationError(
                f"Comment content must be between 1 and {limit} characters"
            )
        return cls(text).root


class AuthorProfile(ValueObject):
    """Display fields of a comment author, resolved from the identity service."""

    id: UserId
    display_name: str
    email: str | None = None
