from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID (None for unknown or malformed IDs)"""
        pass

    @abstractmethod
    async def find_by_owner(self, user_id: str) -> List[Post]:
        """Find all posts written by a user, newest first"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first"""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save post with its likes and comments (create or replace)"""
        pass

    @abstractmethod
    async def remove(self, post: Post) -> None:
        """Remove a post"""
        pass

    @abstractmethod
    async def remove_by_owner(self, user_id: str) -> int:
        """Remove every post written by a user, returning the count"""
        pass
