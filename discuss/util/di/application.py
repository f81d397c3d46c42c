"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetMyCommentsUseCase,
    UpdateCommentUseCase,
    VoteCommentUseCase,
)
from discuss.config import CommentSettings
from discuss.domain.service import (
    CommentService,
    SolutionService,
    ThreadComposer,
    UserService,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        thread_composer: ThreadComposer,
        solution_service: SolutionService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            thread_composer=thread_composer,
            solution_service=solution_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, thread_composer: ThreadComposer
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(thread_composer=thread_composer)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_my_comments_use_case(
        self,
        comment_service: CommentService,
        thread_composer: ThreadComposer,
        comment_settings: CommentSettings,
    ) -> GetMyCommentsUseCase:
        """Provide get my comments use case."""
        return GetMyCommentsUseCase(
            comment_service=comment_service,
            thread_composer=thread_composer,
            comment_settings=comment_settings,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(
        self,
        vote_service: VoteService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> VoteCommentUseCase:
        """Provide vote comment use case."""
        return VoteCommentUseCase(
            vote_service=vote_service,
            comment_service=comment_service,
            user_service=user_service,
        )
