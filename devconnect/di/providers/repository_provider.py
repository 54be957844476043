from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.profile_repository import ProfileRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository
from ...infrastructure.db.mongo_profile_repository import MongoProfileRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        user_collection = container.get("user_collection")
        post_collection = container.get("post_collection")
        profile_collection = container.get("profile_collection")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=user_collection)
        )

        container.register_singleton(
            PostRepository,
            MongoPostRepository(post_collection=post_collection)
        )

        container.register_singleton(
            ProfileRepository,
            MongoProfileRepository(profile_collection=profile_collection)
        )
