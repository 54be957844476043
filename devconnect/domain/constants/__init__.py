"""Constants for domain model field names"""

from .user_fields import UserFields
from .post_fields import PostFields, LikeFields, CommentFields
from .profile_fields import (
    ProfileFields,
    SocialFields,
    ExperienceFields,
    EducationFields,
)

__all__ = [
    "UserFields",
    "PostFields",
    "LikeFields",
    "CommentFields",
    "ProfileFields",
    "SocialFields",
    "ExperienceFields",
    "EducationFields",
]
