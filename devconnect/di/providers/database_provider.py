from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_post_collection,
    get_profile_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all database collections in the container.
        This is the ONLY place where database connections are registered.
        """
        database = get_database()

        container.register_singleton("database", database)
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("post_collection", get_post_collection())
        container.register_singleton("profile_collection", get_profile_collection())
