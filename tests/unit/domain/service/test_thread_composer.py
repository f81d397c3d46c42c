"""Unit tests for ThreadComposer."""

from uuid import uuid4

import pytest

from discuss.domain.error import NotFoundError
from discuss.domain.service import CommentService, ThreadComposer, VoteService
from discuss.domain.value import SolutionId, UserId, VoteKind
from tests.harness import create_env_fixture, seed_solution, seed_user

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestComposePage:
    """Tests for compose_page."""

    @pytest.mark.asyncio
    async def test_threads_carry_authors_and_visible_replies(self, unit_env):
        """Deleted replies are dropped, the parent stays listed."""
        # Arrange
        composer = await unit_env.get(ThreadComposer)
        comments = await unit_env.get(CommentService)
        ada = await seed_user(unit_env, "Ada", "ada@example.com")
        grace = await seed_user(unit_env, "Grace")
        solution = await seed_solution(unit_env, ada)
        parent = await comments.create_comment(solution.id, ada.id, "Why a heap?")
        kept = await comments.create_comment(
            solution.id, grace.id, "O(log n) pops", parent_id=parent.id
        )
        dropped = await comments.create_comment(
            solution.id, grace.id, "nvm", parent_id=parent.id
        )
        await comments.soft_delete_comment(dropped.id, grace.id)

        # Act
        page = await composer.compose_page(solution.id, 1, 20)

        # Assert
        assert page.total == 1
        assert page.total_pages == 1
        [thread] = page.items
        assert thread.comment.id == parent.id
        assert thread.author.display_name == "Ada"
        assert thread.author.email == "ada@example.com"
        assert [r.comment.id for r in thread.replies] == [kept.id]
        assert thread.replies[0].author.display_name == "Grace"
        assert thread.replies[0].replies == []

    @pytest.mark.asyncio
    async def test_viewer_votes_are_attached(self, unit_env):
        composer = await unit_env.get(ThreadComposer)
        comments = await unit_env.get(CommentService)
        votes = await unit_env.get(VoteService)
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        parent = await comments.create_comment(solution.id, author.id, "Top")
        reply = await comments.create_comment(
            solution.id, author.id, "Reply", parent_id=parent.id
        )
        viewer = UserId(uuid4())
        await votes.cast_vote(parent.id, viewer, "up")
        await votes.cast_vote(reply.id, viewer, "down")

        as_viewer = await composer.compose_page(solution.id, 1, 20, viewer_id=viewer)
        anonymous = await composer.compose_page(solution.id, 1, 20)

        [thread] = as_viewer.items
        assert thread.user_vote == VoteKind.UP
        assert thread.replies[0].user_vote == VoteKind.DOWN
        assert anonymous.items[0].user_vote is None
        assert anonymous.items[0].replies[0].user_vote is None

    @pytest.mark.asyncio
    async def test_out_of_range_page_is_empty(self, unit_env):
        composer = await unit_env.get(ThreadComposer)
        comments = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        for i in range(3):
            await comments.create_comment(solution.id, author.id, f"Comment {i}")

        page = await composer.compose_page(solution.id, 5, 2)

        assert page.items == []
        assert page.total == 3
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_empty_solution(self, unit_env):
        composer = await unit_env.get(ThreadComposer)

        page = await composer.compose_page(SolutionId(uuid4()), 1, 20)

        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0

    @pytest.mark.asyncio
    async def test_unknown_author_has_no_profile(self, unit_env):
        composer = await unit_env.get(ThreadComposer)
        comments = await unit_env.get(CommentService)
        owner = await seed_user(unit_env)
        solution = await seed_solution(unit_env, owner)
        await comments.create_comment(solution.id, UserId(uuid4()), "Ghost")

        page = await composer.compose_page(solution.id, 1, 20)

        assert page.items[0].author is None


class TestComposeSingle:
    """Tests for compose_single."""

    @pytest.mark.asyncio
    async def test_single_comment_with_replies(self, unit_env):
        composer = await unit_env.get(ThreadComposer)
        comments = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        parent = await comments.create_comment(solution.id, author.id, "Top")
        reply = await comments.create_comment(
            solution.id, author.id, "Reply", parent_id=parent.id
        )

        thread = await composer.compose_single(parent.id)

        assert thread.comment.id == parent.id
        assert [r.comment.id for r in thread.replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_deleted_comment_is_not_found(self, unit_env):
        composer = await unit_env.get(ThreadComposer)
        comments = await unit_env.get(CommentService)
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        comment = await comments.create_comment(solution.id, author.id, "Gone soon")
        await comments.soft_delete_comment(comment.id, author.id)

        with pytest.raises(NotFoundError):
            await composer.compose_single(comment.id)
