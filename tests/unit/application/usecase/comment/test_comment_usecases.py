"""Unit tests for the comment use cases."""

from uuid import UUID, uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetMyCommentsRequest,
    GetMyCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
    VoteCommentRequest,
    VoteCommentUseCase,
)
from discuss.domain.error import NotFoundError, UnavailableError, ValidationError
from discuss.domain.repository import CommentRepository, UserRepository, VoteRepository
from discuss.domain.value import CommentId, VoteKind, VoteTransition
from tests.harness import create_env_fixture, seed_solution, seed_user

# Unit test fixture
unit_env = create_env_fixture()


async def _break_identity_lookup(env, monkeypatch):
    users = await env.get(UserRepository)

    async def unavailable(user_ids):
        raise ConnectionError("identity service down")

    monkeypatch.setattr(users, "find_by_ids", unavailable)


async def _create(env, solution_id, author_id, content="Nice", parent_id=None):
    use_case = await env.get(CreateCommentUseCase)
    return await use_case.execute(
        CreateCommentRequest(
            solution_id=str(solution_id),
            content=content,
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        )
    )


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_decorated_comment_and_bumps_stat(self, unit_env):
        # Arrange
        author = await seed_user(unit_env, "Ada")
        solution = await seed_solution(unit_env, author)

        # Act
        result = await _create(unit_env, solution.id, author.id, "  Looks right  ")

        # Assert
        assert result.content == "Looks right"
        assert result.author.display_name == "Ada"
        assert result.solution_id == str(solution.id)
        assert result.replies == []
        user = await (await unit_env.get(UserRepository)).find_by_id(author.id)
        assert user.comments_posted == 1

    @pytest.mark.asyncio
    async def test_failed_create_does_not_bump_stat(self, unit_env):
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)

        with pytest.raises(ValidationError):
            await _create(unit_env, solution.id, author.id, "   ")

        user = await (await unit_env.get(UserRepository)).find_by_id(author.id)
        assert user.comments_posted == 0

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        parent = await _create(unit_env, solution.id, author.id, "Top")

        reply = await _create(
            unit_env, solution.id, author.id, "Reply", parent_id=parent.comment_id
        )

        assert reply.parent_id == parent.comment_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "solution_id, message",
        [
            (None, "Please provide a solution ID"),
            ("", "Please provide a solution ID"),
            ("not-a-uuid", "Please provide a valid solution ID"),
        ],
    )
    async def test_missing_or_malformed_solution_id(self, unit_env, solution_id, message):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match=message):
            await use_case.execute(
                CreateCommentRequest(
                    solution_id=solution_id, content="Hi", author_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_identity_outage_stores_nothing(self, unit_env, monkeypatch):
        """A failed author lookup fails the request before the comment is stored."""
        # Arrange
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        await _break_identity_lookup(unit_env, monkeypatch)

        # Act
        with pytest.raises(UnavailableError):
            await _create(unit_env, solution.id, author.id, "Lost?")

        # Assert
        comments = await unit_env.get(CommentRepository)
        assert await comments.count_top_level(solution.id) == 0
        user = await (await unit_env.get(UserRepository)).find_by_id(author.id)
        assert user.comments_posted == 0

    @pytest.mark.asyncio
    async def test_missing_content(self, unit_env):
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="Please provide content"):
            await use_case.execute(
                CreateCommentRequest(
                    solution_id=str(solution.id), content=None, author_id=str(author.id)
                )
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_solution_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(solution_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_default_and_clamped_limits(self, unit_env):
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        for i in range(3):
            await _create(unit_env, solution.id, author.id, f"Comment {i}")
        use_case = await unit_env.get(GetCommentsUseCase)

        default = await use_case.execute(GetCommentsRequest(solution_id=str(solution.id)))
        clamped = await use_case.execute(
            GetCommentsRequest(solution_id=str(solution.id), limit=10_000)
        )

        assert default.pagination.limit == 20
        assert default.pagination.total == 3
        assert default.pagination.pages == 1
        assert clamped.pagination.limit == 100

    @pytest.mark.asyncio
    async def test_viewer_vote_is_included(self, unit_env):
        author = await seed_user(unit_env)
        viewer = await seed_user(unit_env, "Viewer")
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id)
        vote = await unit_env.get(VoteCommentUseCase)
        await vote.execute(
            VoteCommentRequest(
                comment_id=created.comment_id, user_id=str(viewer.id), vote_type="up"
            )
        )
        use_case = await unit_env.get(GetCommentsUseCase)

        result = await use_case.execute(
            GetCommentsRequest(solution_id=str(solution.id), viewer_id=str(viewer.id))
        )

        assert result.data[0].user_vote == VoteKind.UP
        assert result.data[0].upvote_count == 1


class TestVoteCommentUseCase:
    """Tests for VoteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_stat_only_on_net_new_upvotes(self, unit_env):
        """Received upvotes grow on add-up and switch-to-up only."""
        author = await seed_user(unit_env, "Author")
        voter = await seed_user(unit_env, "Voter")
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id)
        use_case = await unit_env.get(VoteCommentUseCase)
        users = await unit_env.get(UserRepository)

        async def vote(kind):
            return await use_case.execute(
                VoteCommentRequest(
                    comment_id=created.comment_id, user_id=str(voter.id), vote_type=kind
                )
            )

        transitions = []
        for kind in ("up", "up", "down", "up", "down", "down"):
            transitions.append((await vote(kind)).transition)

        assert transitions == [
            VoteTransition.ADDED,
            VoteTransition.RETRACTED,
            VoteTransition.ADDED,
            VoteTransition.SWITCHED,
            VoteTransition.SWITCHED,
            VoteTransition.RETRACTED,
        ]
        # added up, then switched down -> up
        assert (await users.find_by_id(author.id)).upvotes_received == 2

    @pytest.mark.asyncio
    async def test_response_carries_counts_and_vote(self, unit_env):
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id)
        use_case = await unit_env.get(VoteCommentUseCase)

        result = await use_case.execute(
            VoteCommentRequest(
                comment_id=created.comment_id, user_id=str(uuid4()), vote_type="down"
            )
        )

        assert result.downvote_count == 1
        assert result.total_votes == -1
        assert result.vote_ratio == 0.0
        assert result.user_vote == VoteKind.DOWN

    @pytest.mark.asyncio
    async def test_identity_outage_leaves_vote_unapplied(self, unit_env, monkeypatch):
        """A failed author lookup fails the vote before ledger or counters move."""
        # Arrange
        author = await seed_user(unit_env)
        voter = await seed_user(unit_env, "Voter")
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id)
        comment_id = CommentId(UUID(created.comment_id))
        await _break_identity_lookup(unit_env, monkeypatch)
        use_case = await unit_env.get(VoteCommentUseCase)

        # Act
        with pytest.raises(UnavailableError):
            await use_case.execute(
                VoteCommentRequest(
                    comment_id=created.comment_id, user_id=str(voter.id), vote_type="up"
                )
            )

        # Assert
        comment = await (await unit_env.get(CommentRepository)).find_by_id(comment_id)
        assert comment.upvote_count == 0
        votes = await unit_env.get(VoteRepository)
        assert await votes.find_by_user_and_comment(voter.id, comment_id) is None
        user = await (await unit_env.get(UserRepository)).find_by_id(author.id)
        assert user.upvotes_received == 0

    @pytest.mark.asyncio
    async def test_missing_vote_type(self, unit_env):
        use_case = await unit_env.get(VoteCommentUseCase)

        with pytest.raises(ValidationError, match="valid vote type"):
            await use_case.execute(
                VoteCommentRequest(
                    comment_id=str(uuid4()), user_id=str(uuid4()), vote_type=None
                )
            )


class TestSingleCommentUseCases:
    """Tests for get/update/delete of one comment."""

    @pytest.mark.asyncio
    async def test_update_then_get(self, unit_env):
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id, "Draft")
        update = await unit_env.get(UpdateCommentUseCase)
        get = await unit_env.get(GetCommentUseCase)

        updated = await update.execute(
            UpdateCommentRequest(
                comment_id=created.comment_id, user_id=str(author.id), content="Final"
            )
        )
        fetched = await get.execute(GetCommentRequest(comment_id=created.comment_id))

        assert updated.is_edited
        assert fetched.content == "Final"

    @pytest.mark.asyncio
    async def test_update_keeps_author_and_own_vote(self, unit_env):
        author = await seed_user(unit_env, "Ada")
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id, "Draft")
        vote = await unit_env.get(VoteCommentUseCase)
        await vote.execute(
            VoteCommentRequest(
                comment_id=created.comment_id, user_id=str(author.id), vote_type="up"
            )
        )
        update = await unit_env.get(UpdateCommentUseCase)

        updated = await update.execute(
            UpdateCommentRequest(
                comment_id=created.comment_id, user_id=str(author.id), content="Final"
            )
        )

        assert updated.author.display_name == "Ada"
        assert updated.user_vote == VoteKind.UP
        assert updated.upvote_count == 1

    @pytest.mark.asyncio
    async def test_update_identity_outage_keeps_content(self, unit_env, monkeypatch):
        """A failed author lookup fails the edit before the content changes."""
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id, "Draft")
        await _break_identity_lookup(unit_env, monkeypatch)
        update = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(UnavailableError):
            await update.execute(
                UpdateCommentRequest(
                    comment_id=created.comment_id,
                    user_id=str(author.id),
                    content="Final",
                )
            )

        comments = await unit_env.get(CommentRepository)
        comment = await comments.find_by_id(CommentId(UUID(created.comment_id)))
        assert comment.content == "Draft"
        assert not comment.is_edited

    @pytest.mark.asyncio
    async def test_delete_message_and_hidden_afterwards(self, unit_env):
        author = await seed_user(unit_env)
        solution = await seed_solution(unit_env, author)
        created = await _create(unit_env, solution.id, author.id)
        delete = await unit_env.get(DeleteCommentUseCase)
        get = await unit_env.get(GetCommentUseCase)

        result = await delete.execute(
            DeleteCommentRequest(comment_id=created.comment_id, user_id=str(author.id))
        )

        assert result.success
        assert result.message == "Comment deleted successfully"
        with pytest.raises(NotFoundError):
            await get.execute(GetCommentRequest(comment_id=created.comment_id))

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, unit_env):
        get = await unit_env.get(GetCommentUseCase)

        with pytest.raises(ValidationError, match="valid comment ID"):
            await get.execute(GetCommentRequest(comment_id="42"))


class TestGetMyCommentsUseCase:
    """Tests for GetMyCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_own_comments_with_default_limit(self, unit_env):
        author = await seed_user(unit_env)
        other = await seed_user(unit_env, "Other")
        solution = await seed_solution(unit_env, author)
        for i in range(12):
            await _create(unit_env, solution.id, author.id, f"Mine {i}")
        await _create(unit_env, solution.id, other.id, "Not mine")
        use_case = await unit_env.get(GetMyCommentsUseCase)

        first = await use_case.execute(GetMyCommentsRequest(user_id=str(author.id)))
        second = await use_case.execute(
            GetMyCommentsRequest(user_id=str(author.id), page=2)
        )

        assert first.pagination.limit == 10
        assert first.pagination.total == 12
        assert first.pagination.pages == 2
        assert first.data[0].content == "Mine 11"
        assert len(second.data) == 2
        assert all(item.author_id == str(author.id) for item in first.data + second.data)
