# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse


class ListPostsUseCase:
    """Use case for listing every post, newest first"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self) -> List[PostResponse]:
        posts = await self.post_repository.find_all()
        return [PostResponse.from_domain(post) for post in posts]


class ListUserPostsUseCase:
    """Use case for listing the posts written by one user, newest first"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, user_id: str) -> List[PostResponse]:
        """
        List posts written by user_id

        Returns:
            List of PostResponse objects; empty when the user has not posted
        """
        posts = await self.post_repository.find_by_owner(user_id)
        return [PostResponse.from_domain(post) for post in posts]
