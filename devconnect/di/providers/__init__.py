from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .post_provider import PostProvider
from .profile_provider import ProfileProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "PostProvider",
    "ProfileProvider",
]
