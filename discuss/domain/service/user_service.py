"""User domain service.

Resolves author display fields and bumps per-user statistics. Stat updates
are best effort: a failure is logged and never fails the calling operation.
"""

from typing import Sequence

import logfire

from discuss.domain.error import UnavailableError
from discuss.domain.repository import UserRepository
from discuss.domain.value import AuthorProfile, UserId, UserStat

from .base import Service


class UserService(Service):
    """Domain service for user identity and statistics."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_identity(self, user_id: UserId) -> AuthorProfile | None:
        """Resolve a user's display fields.

        Args:
            user_id: User ID

        Returns:
            Author profile, or None for an unknown user
        """
        profiles = await self.resolve_identities([user_id])
        return profiles.get(user_id)

    async def resolve_identities(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, AuthorProfile]:
        """Resolve display fields for several users at once.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of known user IDs to their profiles

        Raises:
            UnavailableError: If the identity lookup failed
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.resolve_identities", count=len(unique_ids)):
            try:
                users = await self.user_repository.find_by_ids(unique_ids)
            except Exception as e:
                logfire.error("Identity lookup failed", error=str(e))
                raise UnavailableError("Identity lookup", str(e)) from e

            missing = len(unique_ids) - len(users)
            if missing:
                logfire.warn("Unknown comment authors", missing=missing)
            return {user.id: user.to_profile() for user in users}

    async def record_comment_posted(self, user_id: UserId) -> None:
        """Increment the user's "comments posted" counter (best effort)."""
        await self._increment(user_id, UserStat.COMMENTS_POSTED)

    async def record_upvote_received(self, user_id: UserId) -> None:
        """Increment the user's "upvotes received" counter (best effort)."""
        await self._increment(user_id, UserStat.UPVOTES_RECEIVED)

    async def _increment(self, user_id: UserId, stat: UserStat) -> None:
        with logfire.span(
            "user_service.increment_stat", user_id=str(user_id), stat=stat.value
        ):
            try:
                updated = await self.user_repository.increment_stat(user_id, stat)
            except Exception as e:
                logfire.error(
                    "User stat update failed",
                    user_id=str(user_id),
                    stat=stat.value,
                    error=str(e),
                )
                return

            if updated:
                logfire.info("User stat incremented", user_id=str(user_id), stat=stat.value)
            else:
                logfire.warn(
                    "User stat not updated, unknown user",
                    user_id=str(user_id),
                    stat=stat.value,
                )
