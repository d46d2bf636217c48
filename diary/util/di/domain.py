"""Domain layer DI providers."""

from dishka import Scope, provide

from diary.config import AuthSettings
from diary.domain.repository import (
    CommentRepository,
    DiaryRepository,
    ReactionRepository,
    UserRepository,
)
from diary.domain.service import (
    AuthService,
    CommentService,
    DiaryService,
    JWTService,
    ReactionLedger,
    UserService,
)
from diary.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide registration/login domain service."""
        return AuthService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_reaction_ledger(
        self, reaction_repository: ReactionRepository
    ) -> ReactionLedger:
        """Provide reaction ledger."""
        return ReactionLedger(reaction_repository=reaction_repository)

    @provide
    def get_diary_service(
        self,
        diary_repository: DiaryRepository,
        comment_repository: CommentRepository,
        reaction_ledger: ReactionLedger,
    ) -> DiaryService:
        """Provide diary domain service."""
        return DiaryService(
            diary_repository=diary_repository,
            comment_repository=comment_repository,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        diary_service: DiaryService,
        reaction_ledger: ReactionLedger,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            diary_service=diary_service,
            reaction_ledger=reaction_ledger,
        )
