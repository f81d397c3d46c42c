"""Integration tests for the PostgreSQL repositories.

Need a migrated database at DATABASE__URL. Enable with DISCUSS_INTEGRATION=1.
"""

import os

import pytest

from discuss.domain.repository import CommentRepository, UserRepository
from discuss.domain.service import CommentService, VoteService
from discuss.domain.value import UserStat, VoteKind
from tests.harness import create_env_fixture, seed_solution, seed_user

pytestmark = pytest.mark.skipif(
    os.getenv("DISCUSS_INTEGRATION") != "1",
    reason="set DISCUSS_INTEGRATION=1 with a migrated postgres to run",
)

# Integration tests - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresComments:
    """Round trips through the comments and comment_votes tables."""

    @pytest.mark.asyncio
    async def test_reply_append_and_listing(self, integration_env):
        # Arrange
        comments = await integration_env.get(CommentService)
        repo = await integration_env.get(CommentRepository)
        author = await seed_user(integration_env, "Ada")
        solution = await seed_solution(integration_env, author)

        # Act
        older = await comments.create_comment(solution.id, author.id, "First")
        newer = await comments.create_comment(solution.id, author.id, "Second")
        reply = await comments.create_comment(
            solution.id, author.id, "Reply", parent_id=older.id
        )

        # Assert
        listed = await repo.find_top_level(solution.id, limit=10)
        assert [c.id for c in listed] == [newer.id, older.id]
        assert listed[1].reply_ids == [reply.id]
        assert await repo.count_top_level(solution.id) == 2
        assert [c.id for c in await repo.find_by_ids([reply.id])] == [reply.id]

    @pytest.mark.asyncio
    async def test_vote_upsert_and_retract(self, integration_env):
        comments = await integration_env.get(CommentService)
        votes = await integration_env.get(VoteService)
        author = await seed_user(integration_env, "Ada")
        voter = await seed_user(integration_env, "Grace")
        solution = await seed_solution(integration_env, author)
        comment = await comments.create_comment(solution.id, author.id, "Vote me")

        await votes.cast_vote(comment.id, voter.id, "up")
        switched = await votes.cast_vote(comment.id, voter.id, "down")
        assert (switched.upvote_count, switched.downvote_count) == (0, 1)
        assert await votes.get_user_vote(comment.id, voter.id) == VoteKind.DOWN

        retracted = await votes.cast_vote(comment.id, voter.id, "down")
        assert (retracted.upvote_count, retracted.downvote_count) == (0, 0)
        assert await votes.get_user_vote(comment.id, voter.id) is None

    @pytest.mark.asyncio
    async def test_stat_increment(self, integration_env):
        users = await integration_env.get(UserRepository)
        ada = await seed_user(integration_env, "Ada")

        assert await users.increment_stat(ada.id, UserStat.UPVOTES_RECEIVED)
        assert (await users.find_by_id(ada.id)).upvotes_received == 1
