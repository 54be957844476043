# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from .post_lookup import load_post


class GetPostUseCase:
    """Use case for getting a post by ID"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> PostResponse:
        """
        Get a post by ID

        Raises:
            NotFoundError: If post not found
        """
        post = await load_post(self.post_repository, post_id)
        return PostResponse.from_domain(post)
