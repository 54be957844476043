from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse, AuthenticatedUser, MessageResponse
from .post_dto import (
    PostTextRequest,
    CommentTextRequest,
    LikeResponse,
    CommentResponse,
    PostResponse,
)
from .profile_dto import (
    ProfileUpsertRequest,
    ExperienceCreateRequest,
    EducationCreateRequest,
    SocialLinksResponse,
    ExperienceResponse,
    EducationResponse,
    ProfileOwnerResponse,
    ProfileResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "AuthenticatedUser",
    "MessageResponse",
    "PostTextRequest",
    "CommentTextRequest",
    "LikeResponse",
    "CommentResponse",
    "PostResponse",
    "ProfileUpsertRequest",
    "ExperienceCreateRequest",
    "EducationCreateRequest",
    "SocialLinksResponse",
    "ExperienceResponse",
    "EducationResponse",
    "ProfileOwnerResponse",
    "ProfileResponse",
]
