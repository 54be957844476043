from .user_repository import UserRepository
from .post_repository import PostRepository
from .profile_repository import ProfileRepository

__all__ = ["UserRepository", "PostRepository", "ProfileRepository"]
