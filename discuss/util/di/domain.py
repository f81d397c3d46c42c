"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, CommentSettings
from discuss.domain.repository import (
    CommentRepository,
    SolutionRepository,
    UserRepository,
    VoteRepository,
)
from discuss.domain.service import (
    CommentService,
    JWTService,
    SolutionService,
    ThreadComposer,
    UserService,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_solution_service(
        self, solution_repository: SolutionRepository
    ) -> SolutionService:
        """Provide solution lookup service."""
        return SolutionService(solution_repository=solution_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        solution_service: SolutionService,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            solution_service=solution_service,
            max_length=comment_settings.max_length,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_thread_composer(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> ThreadComposer:
        """Provide thread composer."""
        return ThreadComposer(
            comment_service=comment_service,
            vote_service=vote_service,
            user_service=user_service,
        )
