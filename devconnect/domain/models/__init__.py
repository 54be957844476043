from .user import User
from .post import Post, Like, Comment
from .profile import (
    Profile,
    ProfileUpdate,
    SocialLinks,
    Experience,
    Education,
    parse_skills,
)

__all__ = [
    "User",
    "Post",
    "Like",
    "Comment",
    "Profile",
    "ProfileUpdate",
    "SocialLinks",
    "Experience",
    "Education",
    "parse_skills",
]
