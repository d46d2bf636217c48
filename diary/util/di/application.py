"""Application layer DI providers."""

from dishka import Scope, provide

from diary.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    ResolveActorUseCase,
)
from diary.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ReactToCommentUseCase,
    UpdateCommentUseCase,
)
from diary.application.usecase.diary import (
    CreateDiaryUseCase,
    DeleteDiaryUseCase,
    GetDiaryUseCase,
    ListMyDiariesUseCase,
    ListPublicDiariesUseCase,
    ReactToDiaryUseCase,
    ToggleVisibilityUseCase,
    UpdateDiaryUseCase,
)
from diary.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_resolve_actor_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> ResolveActorUseCase:
        """Provide bearer token to actor resolution."""
        return ResolveActorUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(user_service=user_service)

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        return GetUserProfileUseCase(user_service=user_service)

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        return UpdateUserProfileUseCase(user_service=user_service)

    # Diary use cases
    @provide
    def get_create_diary_use_case(
        self, diary_service: DiaryService, user_service: UserService
    ) -> CreateDiaryUseCase:
        return CreateDiaryUseCase(diary_service=diary_service, user_service=user_service)

    @provide
    def get_diary_use_case(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> GetDiaryUseCase:
        return GetDiaryUseCase(
            diary_service=diary_service,
            user_service=user_service,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_list_public_diaries_use_case(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> ListPublicDiariesUseCase:
        return ListPublicDiariesUseCase(
            diary_service=diary_service,
            user_service=user_service,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_list_my_diaries_use_case(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> ListMyDiariesUseCase:
        return ListMyDiariesUseCase(
            diary_service=diary_service,
            user_service=user_service,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_update_diary_use_case(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> UpdateDiaryUseCase:
        return UpdateDiaryUseCase(
            diary_service=diary_service,
            user_service=user_service,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_toggle_visibility_use_case(
        self,
        diary_service: DiaryService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> ToggleVisibilityUseCase:
        return ToggleVisibilityUseCase(
            diary_service=diary_service,
            user_service=user_service,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_delete_diary_use_case(
        self, diary_service: DiaryService
    ) -> DeleteDiaryUseCase:
        return DeleteDiaryUseCase(diary_service=diary_service)

    @provide
    def get_react_to_diary_use_case(
        self, diary_service: DiaryService
    ) -> ReactToDiaryUseCase:
        return ReactToDiaryUseCase(diary_service=diary_service)

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddCommentUseCase:
        return AddCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_comments_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> GetCommentsUseCase:
        return GetCommentsUseCase(
            comment_service=comment_service,
            user_service=user_service,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        reaction_ledger: ReactionLedger,
    ) -> UpdateCommentUseCase:
        return UpdateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            reaction_ledger=reaction_ledger,
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_react_to_comment_use_case(
        self, comment_service: CommentService
    ) -> ReactToCommentUseCase:
        return ReactToCommentUseCase(comment_service=comment_service)
