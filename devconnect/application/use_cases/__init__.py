from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    AuthenticateTokenUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    ListUserPostsUseCase,
    GetPostUseCase,
    EditPostUseCase,
    DeletePostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    AddCommentUseCase,
    EditCommentUseCase,
    DeleteCommentUseCase,
)
from .profile import (
    UpsertProfileUseCase,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    AddExperienceUseCase,
    RemoveExperienceUseCase,
    AddEducationUseCase,
    RemoveEducationUseCase,
    DeleteAccountUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "AuthenticateTokenUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "ListUserPostsUseCase",
    "GetPostUseCase",
    "EditPostUseCase",
    "DeletePostUseCase",
    "LikePostUseCase",
    "UnlikePostUseCase",
    "AddCommentUseCase",
    "EditCommentUseCase",
    "DeleteCommentUseCase",
    "UpsertProfileUseCase",
    "GetProfileByUserUseCase",
    "ListProfilesUseCase",
    "AddExperienceUseCase",
    "RemoveExperienceUseCase",
    "AddEducationUseCase",
    "RemoveEducationUseCase",
    "DeleteAccountUseCase",
]
